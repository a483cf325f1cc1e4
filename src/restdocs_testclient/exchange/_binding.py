import logging

import fastapi
import httpx
import requests

from restdocs_testclient.exchange._adapters import HttpxExchangeResult, RequestsExchangeResult, StarletteExchangeResult
from restdocs_testclient.exchange._models import ExchangeResult

logger = logging.getLogger(__name__)


def bind_exchange_result(
    upstream: ExchangeResult | httpx.Response | requests.Response | fastapi.Response,
) -> ExchangeResult:
    """
    Wraps a finished upstream response in the ExchangeResult variant for its type

    TestClient (httpx), requests and server-side Starlette responses all report raw status codes,
    so they bind to RawStatusExchangeResult adapters.
    """
    if isinstance(upstream, ExchangeResult):
        return upstream
    if isinstance(upstream, httpx.Response):
        return HttpxExchangeResult(upstream)
    if isinstance(upstream, requests.Response):
        return RequestsExchangeResult(upstream)
    if isinstance(upstream, fastapi.Response):
        return StarletteExchangeResult(upstream)

    logger.error("No exchange result adapter for %s", type(upstream))
    raise ValueError(f"Unhandled response type: {type(upstream)}")
