from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from starlette.datastructures import Headers
from starlette.requests import Request


@runtime_checkable
class RequestView(Protocol):
    """What the resolver needs from a request: headers and the socket address."""

    remote_addr: str

    def get_header(self, name: str) -> str | None: ...


@dataclass(frozen=True)
class HeaderRequest:
    """A plain request view, handy for tests and non-ASGI callers.

    Header lookup is case-insensitive and returns the first value.
    """

    headers: Headers = field(default_factory=Headers)
    remote_addr: str = ""

    @classmethod
    def build(
        cls, headers: Mapping[str, str] | None = None, remote_addr: str = ""
    ) -> "HeaderRequest":
        return cls(headers=Headers(headers=dict(headers or {})), remote_addr=remote_addr)

    def get_header(self, name: str) -> str | None:
        return self.headers.get(name)


def format_host_port(host: str, port: int | str) -> str:
    """Join host and port, bracketing IPv6 hosts."""
    if ":" in host:
        return f"[{host}]:{port}"
    return f"{host}:{port}"


class StarletteRequestView:
    """Adapts a Starlette/FastAPI Request to RequestView."""

    def __init__(self, request: Request):
        self._request = request

    @property
    def remote_addr(self) -> str:
        client = self._request.client
        if client is None or not client.host:
            return ""
        return format_host_port(client.host, client.port)

    def get_header(self, name: str) -> str | None:
        return self._request.headers.get(name)


def as_request_view(request: RequestView | Request) -> RequestView:
    if isinstance(request, RequestView):
        return request
    return StarletteRequestView(request)
