"""Resolve the client address of a request from its forwarding headers.

Header values are attacker-controlled, so nothing here raises: missing or
malformed data resolves to an empty string.
"""

from starlette.requests import Request

from clientip.ip import is_public_address
from clientip.request import RequestView, as_request_view

X_FORWARDED_FOR = "X-Forwarded-For"
X_REAL_IP = "X-Real-IP"


def split_host_port(hostport: str) -> tuple[str, str] | None:
    """Split "host:port" or "[host]:port". Returns None if malformed.

    An empty port is accepted; a missing port separator is not.
    """
    if hostport.startswith("["):
        end = hostport.find("]")
        if end < 0:
            return None
        host, rest = hostport[1:end], hostport[end + 1 :]
        if not rest.startswith(":"):
            return None
        port = rest[1:]
    else:
        i = hostport.rfind(":")
        if i < 0:
            return None
        host, port = hostport[:i], hostport[i + 1 :]
        if ":" in host or "[" in host or "]" in host:
            return None
    if "[" in port or "]" in port:
        return None
    return host, port


def remote_address(request: RequestView | Request) -> str:
    """Host part of the request's remote socket address, or ""."""
    view = as_request_view(request)
    parts = split_host_port((view.remote_addr or "").strip())
    if parts is None:
        return ""
    return parts[0]


def _header(view: RequestView, name: str) -> str:
    return (view.get_header(name) or "").strip()


def forwarded_for(request: RequestView | Request) -> list[str]:
    """X-Forwarded-For entries in header order, trimmed, empties dropped."""
    view = as_request_view(request)
    value = view.get_header(X_FORWARDED_FOR) or ""
    return [entry.strip() for entry in value.split(",") if entry.strip()]


def client_address(request: RequestView | Request) -> str:
    """Best guess at the originating client.

    Left-most X-Forwarded-For entry, then X-Real-IP, then the socket host.
    """
    view = as_request_view(request)

    xff = view.get_header(X_FORWARDED_FOR) or ""
    ip = xff.split(",")[0].strip()
    if ip:
        return ip

    ip = _header(view, X_REAL_IP)
    if ip:
        return ip

    return remote_address(view)


def client_public_address(request: RequestView | Request) -> str:
    """First public address found, or "".

    X-Forwarded-For is scanned right to left, so private hops appended by
    nearby proxies are skipped. X-Real-IP and the socket host follow.
    """
    view = as_request_view(request)

    # Unparseable entries count as neither local nor public and are skipped
    for ip in reversed(forwarded_for(view)):
        if is_public_address(ip):
            return ip

    ip = _header(view, X_REAL_IP)
    if ip and is_public_address(ip):
        return ip

    ip = remote_address(view)
    if ip and is_public_address(ip):
        return ip

    return ""
