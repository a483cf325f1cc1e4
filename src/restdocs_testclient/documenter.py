import logging
from collections.abc import Mapping
from types import MappingProxyType

import fastapi
import httpx
import requests

from restdocs_testclient.config import Config
from restdocs_testclient.config_loader import get_config
from restdocs_testclient.converter import ResponseConverter
from restdocs_testclient.exchange import ExchangeResult, bind_exchange_result
from restdocs_testclient.models import OperationResponse
from restdocs_testclient.persistence import YamlOperationPersister

logger = logging.getLogger(__name__)


class OperationDocumenter:
    """
    Converts responses captured in tests and keeps them, keyed by operation name,
    for a documentation renderer to pick up
    """

    _operations: dict[str, OperationResponse]

    def __init__(
        self,
        config: Config | None = None,
        persister: YamlOperationPersister | None = None,
        converter: ResponseConverter | None = None,
    ):
        self._config = config or get_config()
        self._persister = persister or YamlOperationPersister(
            self._config.output_dir,
            text_content_types=self._config.text_content_types,
            default_charset=self._config.default_charset,
        )
        self._converter = converter or ResponseConverter()
        self._operations = {}

    @property
    def operations(self) -> Mapping[str, OperationResponse]:
        return MappingProxyType(self._operations)

    def document(
        self,
        name: str,
        upstream: ExchangeResult | httpx.Response | requests.Response | fastapi.Response,
    ) -> OperationResponse:
        if not name or not name.strip("/"):
            raise ValueError(f"Invalid operation name: {name!r}")

        response = self._converter.convert(bind_exchange_result(upstream))
        # save before keeping the response so a failed save leaves operations unchanged
        if self._config.autosave:
            self._persister.save_operation(name, response)

        if name in self._operations:
            logger.warning("Replacing previously documented response for %s", name)
        self._operations[name] = response
        logger.info("📝 Documented %s (status %s)", name, response.status_code)
        return response

    def save_operations(self):
        for name, response in self._operations.items():
            self._persister.save_operation(name, response)
