"""Proxy Target Resolution.

프록시 대상 URL 검증, 파일 호스팅 공유 링크 재작성, 호스트 허용 목록 검사.
"""

from __future__ import annotations

import re
from urllib.parse import parse_qs, quote, urlparse

from apps.drive_relay.domain.exceptions.validation import (
    HostNotAllowedError,
    InvalidProxyTargetError,
)

ALLOWED_SCHEMES = ("http", "https")

DRIVE_HOST = "drive.google.com"
DRIVE_VIEW_PATH = re.compile(r"^/file/d/([^/]+)/view$")
DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"

# 공백, 제어 문자 (URL 파서가 거부하는 호스트)
_CONTROL_CHARS = re.compile(r"[\x00-\x20\x7f]")


def _drive_download_url(file_id: str) -> str:
    return DRIVE_DOWNLOAD_URL.format(file_id=quote(file_id, safe=""))


def rewrite_share_link(url: str) -> str:
    """Drive "view" 공유 링크를 직접 다운로드 URL로 변환.

    ID를 찾지 못하면 원본 URL을 그대로 반환합니다.
    """
    parsed = urlparse(url)
    if parsed.hostname != DRIVE_HOST:
        return url

    match = DRIVE_VIEW_PATH.match(parsed.path)
    if match and match.group(1):
        return _drive_download_url(match.group(1))

    if parsed.path == "/uc":
        ids = parse_qs(parsed.query).get("id")
        if ids and ids[0]:
            return _drive_download_url(ids[0])

    return url


def is_host_allowed(host: str, whitelist: list[str]) -> bool:
    """도메인 또는 서브도메인 일치 여부 (빈 목록이면 전부 허용)."""
    if not whitelist:
        return True
    host = host.lower()
    return any(host == domain or host.endswith(f".{domain}") for domain in whitelist)


def resolve_proxy_target(raw_url: str, whitelist: list[str]) -> str:
    """프록시 대상 URL을 검증하고 최종 fetch URL을 반환합니다.

    Args:
        raw_url: 호출자가 넘긴 URL
        whitelist: 허용 도메인 목록 (소문자, 비어 있으면 제한 없음)

    Raises:
        InvalidProxyTargetError: 절대 http/https URL이 아닌 경우
        HostNotAllowedError: 허용 목록에 없는 호스트
    """
    try:
        parsed = urlparse(raw_url.strip())
        hostname = parsed.hostname
        # 범위 밖 포트는 여기서 ValueError
        parsed.port
    except ValueError as e:
        raise InvalidProxyTargetError() from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES or not hostname:
        raise InvalidProxyTargetError()
    if _CONTROL_CHARS.search(parsed.netloc):
        raise InvalidProxyTargetError()

    target = rewrite_share_link(raw_url.strip())
    target_host = urlparse(target).hostname or hostname

    if not is_host_allowed(target_host, whitelist):
        raise HostNotAllowedError(target_host)

    return target
