"""PKCE (Proof Key for Code Exchange) helpers."""

from __future__ import annotations

import base64
import hashlib
import secrets

DEFAULT_VERIFIER_BYTES = 64


def _base64url(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def generate_code_verifier(length: int = DEFAULT_VERIFIER_BYTES) -> str:
    """CSPRNG 바이트 length개를 padding 없는 base64url로 인코딩."""
    return _base64url(secrets.token_bytes(length))


def generate_code_challenge(code_verifier: str) -> str:
    """PKCE code_challenge 생성 (S256)."""
    digest = hashlib.sha256(code_verifier.encode("utf-8")).digest()
    return _base64url(digest)
