"""Header value encoding."""

from urllib.parse import quote

# encodeURIComponent과 동일하게 남기는 문자
_URI_COMPONENT_SAFE = "!*'()"


def encode_uri_component(value: str) -> str:
    """헤더에 안전하게 실을 수 있도록 퍼센트 인코딩."""
    return quote(value, safe=_URI_COMPONENT_SAFE)
