from __future__ import annotations
import enum
import msgspec

HeaderFields = tuple[tuple[str, str], ...]


class HttpMethod(str, enum.Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    HEAD = "HEAD"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"

    @classmethod
    def coerce(cls, value: "HttpMethod | str") -> "HttpMethod":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise ValueError(f"unsupported http method: {value!r}") from None

    def __str__(self) -> str:
        return self.value


def _values(headers: HeaderFields, name: str) -> list[str]:
    key = name.lower()
    return [v for k, v in headers if k.lower() == key]


class HttpRequest(msgspec.Struct, frozen=True):
    method: HttpMethod = HttpMethod.GET
    path: str | None = None
    headers: HeaderFields = ()

    def header(self, name: str, default: str | None = None) -> str | None:
        vals = _values(self.headers, name)
        return vals[0] if vals else default

    def header_values(self, name: str) -> list[str]:
        return _values(self.headers, name)


class HttpResponse(msgspec.Struct, frozen=True):
    status: int
    headers: HeaderFields = ()

    def header(self, name: str, default: str | None = None) -> str | None:
        vals = _values(self.headers, name)
        return vals[0] if vals else default

    def header_values(self, name: str) -> list[str]:
        return _values(self.headers, name)
