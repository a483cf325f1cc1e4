import fastapi
import httpx
import requests

from restdocs_testclient import constants
from restdocs_testclient.exchange._models import RawStatusExchangeResult


class HttpxExchangeResult(RawStatusExchangeResult):
    """
    Adapts an httpx.Response, which is what FastAPI/Starlette's TestClient returns
    """

    def __init__(self, response: httpx.Response):
        try:
            self._body = response.content
        except httpx.ResponseNotRead as e:
            raise ValueError("Response body has not been read - call read() before converting") from e
        self._response = response

    @property
    def response(self) -> httpx.Response:
        return self._response

    @property
    def raw_status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> list[tuple[str, str]]:
        encoding = self._response.headers.encoding
        return [(name.decode(encoding), value.decode(encoding)) for name, value in self._response.headers.raw]

    @property
    def body(self) -> bytes:
        return self._body


class RequestsExchangeResult(RawStatusExchangeResult):
    """
    Adapts a requests.Response
    """

    def __init__(self, response: requests.Response):
        try:
            self._body = response.content or b""
        except RuntimeError as e:
            # raised by requests when a streamed body has already been consumed
            raise ValueError(f"Response body is no longer available for {response.url}") from e
        self._response = response
        # requests joins repeated headers with ", " which breaks Set-Cookie,
        # so read from urllib3's header dict when the response came off the wire
        raw_headers = getattr(response.raw, "headers", None)
        self._header_source = raw_headers if raw_headers is not None else response.headers

    @property
    def response(self) -> requests.Response:
        return self._response

    @property
    def raw_status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> list[tuple[str, str]]:
        return list(self._header_source.items())

    @property
    def body(self) -> bytes:
        return self._body


class StarletteExchangeResult(RawStatusExchangeResult):
    """
    Adapts a server-side FastAPI/Starlette Response whose body has been rendered
    """

    def __init__(self, response: fastapi.Response):
        body = getattr(response, "body", None)
        if body is None:
            # StreamingResponse and FileResponse only produce their body when sent
            raise ValueError(f"Response body is not buffered for {type(response).__name__}")
        self._body = bytes(body)
        self._response = response

    @property
    def response(self) -> fastapi.Response:
        return self._response

    @property
    def raw_status_code(self) -> int:
        return self._response.status_code

    @property
    def headers(self) -> list[tuple[str, str]]:
        return [
            (name.decode(constants.HEADER_ENCODING), value.decode(constants.HEADER_ENCODING))
            for name, value in self._response.raw_headers
        ]

    @property
    def body(self) -> bytes:
        return self._body
