from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from http import HTTPStatus

from restdocs_testclient.models import ResponseCookie, flatten_headers


class ExchangeResult(ABC):
    """
    A finished HTTP exchange that can only report a standard HTTP status

    Implementations must have the body fully buffered by the time they are constructed.
    """

    @property
    @abstractmethod
    def status(self) -> HTTPStatus: ...

    @property
    def status_code(self) -> int:
        return self.status.value

    @property
    @abstractmethod
    def headers(self) -> list[tuple[str, str]]:
        """
        Ordered (name, value) pairs - a name appears once per value
        """

    @property
    def cookies(self) -> list[ResponseCookie]:
        """
        Structured cookies known to the exchange that may not be present as Set-Cookie headers
        """
        return []

    @property
    @abstractmethod
    def body(self) -> bytes: ...


class RawStatusExchangeResult(ExchangeResult):
    """
    A finished HTTP exchange that reports the numeric status code as sent,
    which may fall outside the standard HTTPStatus values (e.g. 210)
    """

    @property
    @abstractmethod
    def raw_status_code(self) -> int: ...

    @property
    def status(self) -> HTTPStatus:
        # raises ValueError for non-standard codes
        return HTTPStatus(self.raw_status_code)

    @property
    def status_code(self) -> int:
        return self.raw_status_code


class CapturedExchange(ExchangeResult):
    """
    An exchange captured by hand or by a client without a native adapter
    """

    _status: HTTPStatus
    _headers: list[tuple[str, str]]
    _cookies: list[ResponseCookie]
    _body: bytes

    def __init__(
        self,
        status: HTTPStatus,
        headers: Mapping[str, str | list[str]] | Iterable[tuple[str, str]] | None = None,
        body: bytes | str = b"",
        cookies: list[ResponseCookie] | None = None,
    ):
        self._status = HTTPStatus(status)
        if headers is None:
            self._headers = []
        elif isinstance(headers, Mapping):
            self._headers = flatten_headers(headers)
        else:
            self._headers = list(headers)
        self._body = body.encode("utf-8") if isinstance(body, str) else bytes(body)
        self._cookies = list(cookies or [])

    @property
    def status(self) -> HTTPStatus:
        return self._status

    @property
    def headers(self) -> list[tuple[str, str]]:
        return list(self._headers)

    @property
    def cookies(self) -> list[ResponseCookie]:
        return list(self._cookies)

    @property
    def body(self) -> bytes:
        return self._body
