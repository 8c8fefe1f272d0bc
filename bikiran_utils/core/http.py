import ipaddress
import logging
from typing import Mapping, Optional

from fastapi import Request


logger = logging.getLogger(__name__)

CF_CONNECTING_IP = "CF-Connecting-IP"
X_FORWARDED_FOR = "X-Forwarded-For"


def _header(headers: Mapping[str, str], name: str) -> str:
    value = headers.get(name)
    if value is None and not hasattr(headers, "getlist"):
        # Plain dicts are case-sensitive, HTTP headers are not
        lowered = name.lower()
        value = next((v for k, v in headers.items() if k.lower() == lowered), None)
    return (value or "").strip()


def resolve_client_ip(headers: Optional[Mapping[str, str]], peer: Optional[str] = None) -> str:
    """Pick the client address: Cloudflare header, then X-Forwarded-For, then the peer."""
    headers = headers or {}

    cf_ip = _header(headers, CF_CONNECTING_IP)
    if cf_ip:
        return cf_ip

    # The first X-Forwarded-For entry is the original client
    forwarded = _header(headers, X_FORWARDED_FOR)
    for entry in forwarded.split(","):
        if entry.strip():
            return entry.strip()

    return (peer or "").strip()


def get_ip_string(request: Optional[Request]) -> str:
    if request is None:
        return ""
    peer = request.client.host if request.client else None
    return resolve_client_ip(request.headers, peer)


def ip_to_long(ip: Optional[str]) -> int:
    """Pack an IPv4 address big-endian into an unsigned 32-bit integer, 0 otherwise."""
    try:
        address = ipaddress.ip_address((ip or "").strip())
    except ValueError:
        logger.debug(f"Cannot convert client address to integer: {ip!r}")
        return 0
    if address.version != 4:
        return 0
    b0, b1, b2, b3 = address.packed
    return b0 << 24 | b1 << 16 | b2 << 8 | b3


def get_ip_long(request: Optional[Request]) -> int:
    return ip_to_long(get_ip_string(request))
