import base64
import logging
import os

import yaml

from restdocs_testclient import constants
from restdocs_testclient.factory import OperationResponseFactory
from restdocs_testclient.models import MediaType, OperationResponse

logger = logging.getLogger(__name__)

RESPONSE_FILE_NAME = "response.yaml"


class YamlOperationPersister:
    def __init__(
        self,
        output_dir: str,
        text_content_types: list[str] | None = None,
        default_charset: str = constants.DEFAULT_CHARSET,
    ):
        self._output_dir = output_dir
        self._text_content_types = (
            text_content_types if text_content_types is not None else list(constants.DEFAULT_TEXT_CONTENT_TYPES)
        )
        self._default_charset = default_charset
        self._factory = OperationResponseFactory()
        # operation name last saved to each path, to spot names that sanitise to the same directory
        self._saved_names: dict[str, str] = {}

    def save_operation(self, name: str, response: OperationResponse):
        status = response.status
        response_data = {
            "status": {"code": response.status_code, "message": status.phrase if status else ""},
            "headers": response.headers.to_dict(),
            "body": self._body_to_data(response),
        }

        operation_path = self.get_operation_file_path(name)
        previous_name = self._saved_names.get(operation_path)
        if previous_name is not None and previous_name != name:
            logger.warning("Response for %s overwrites response for %s at %s", name, previous_name, operation_path)
        self._saved_names[operation_path] = name
        os.makedirs(os.path.dirname(operation_path), exist_ok=True)
        with open(operation_path, "w", encoding="utf-8") as f:
            yaml.dump({"response": response_data, "version": 1}, stream=f, Dumper=yaml.CDumper, sort_keys=False)
        logger.info("💾 Response for %s saved to %s", name, operation_path)

    def load_operation(self, name: str) -> OperationResponse | None:
        operation_path = self.get_operation_file_path(name)
        if not os.path.exists(operation_path):
            logger.warning("No saved response found at %s", operation_path)
            return None

        with open(operation_path, "r", encoding="utf-8") as f:
            operation_data = yaml.load(f, Loader=yaml.CLoader)
        response_data = operation_data["response"]
        body = response_data.get("body", {})
        if "base64" in body:
            content = base64.b64decode(body["base64"])
        else:
            content = body.get("string", "").encode(body.get("charset", self._default_charset))
        return self._factory.create(response_data["status"]["code"], response_data.get("headers", {}), content)

    def get_operation_file_path(self, name: str) -> str:
        operation_dir_name = name.strip("/").replace("/", "_")
        if not operation_dir_name:
            raise ValueError(f"Invalid operation name: {name!r}")
        return os.path.join(self._output_dir, operation_dir_name, RESPONSE_FILE_NAME)

    def _body_to_data(self, response: OperationResponse) -> dict:
        content_type = response.headers.content_type
        if self._is_text(content_type):
            charset = content_type.charset or self._default_charset
            text = _decode_exactly(response.content, charset)
            if text is not None:
                # simplify format for editing saved responses
                return {"string": text, "charset": charset}
            logger.warning("Body does not round-trip as %s (content type %s) - saving as base64", charset, content_type)
        if not response.content:
            return {"string": ""}
        return {"base64": base64.b64encode(response.content).decode("ascii")}

    def _is_text(self, content_type: MediaType | None) -> bool:
        if content_type is None:
            return False
        return content_type.type == "text" or content_type.essence in self._text_content_types


def _decode_exactly(content: bytes, charset: str) -> str | None:
    """
    Decodes content, returning None unless encoding the text with charset gives back the same bytes
    """
    try:
        text = content.decode(charset)
        if text.encode(charset) != content:
            return None
    except (LookupError, UnicodeError):
        return None
    return text
