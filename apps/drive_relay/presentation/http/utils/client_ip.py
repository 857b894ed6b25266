"""Client IP resolution."""

from fastapi import Request

UNKNOWN = "unknown"


def get_client_ip(request: Request) -> str:
    """프록시 헤더 우선순위: cf-connecting-ip > x-real-ip > x-forwarded-for 첫 번째 hop."""
    headers = request.headers

    cf_ip = headers.get("cf-connecting-ip")
    if cf_ip:
        return cf_ip.strip()

    real_ip = headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    forwarded = headers.get("x-forwarded-for")
    if forwarded:
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop

    return UNKNOWN


def get_user_agent(request: Request) -> str:
    return request.headers.get("user-agent") or UNKNOWN
