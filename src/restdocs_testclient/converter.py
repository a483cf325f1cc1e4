import logging

import fastapi
import httpx
import requests

from restdocs_testclient import constants
from restdocs_testclient.exchange import ExchangeResult, bind_exchange_result
from restdocs_testclient.factory import OperationResponseFactory
from restdocs_testclient.models import OperationResponse

logger = logging.getLogger(__name__)


class ResponseConverter:
    """
    Converts a finished ExchangeResult into an OperationResponse
    """

    def __init__(self, factory: OperationResponseFactory | None = None):
        self._factory = factory or OperationResponseFactory()

    def convert(self, result: ExchangeResult) -> OperationResponse:
        headers = self._extract_headers(result)
        response = self._factory.create(result.status_code, headers, result.body)
        logger.debug(
            "Converted %s: status=%s, headers=%s, %d body bytes",
            type(result).__name__,
            response.status_code,
            list(response.headers),
            len(response.content),
        )
        return response

    def _extract_headers(self, result: ExchangeResult) -> list[tuple[str, str]]:
        headers = list(result.headers)
        cookies = result.cookies
        if not cookies:
            return headers

        # An existing Set-Cookie header is taken to already describe the cookies
        if any(name.lower() == constants.SET_COOKIE.lower() for name, _ in headers):
            return headers

        headers.extend((constants.SET_COOKIE, cookie.to_set_cookie_header()) for cookie in cookies)
        return headers


def convert_response(
    upstream: ExchangeResult | httpx.Response | requests.Response | fastapi.Response,
) -> OperationResponse:
    """
    Binds upstream to its ExchangeResult adapter and converts it
    """
    return ResponseConverter().convert(bind_exchange_result(upstream))
