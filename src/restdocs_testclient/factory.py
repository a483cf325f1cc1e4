from collections.abc import Iterable, Mapping

from restdocs_testclient import constants
from restdocs_testclient.models import HttpHeaders, OperationResponse


class OperationResponseFactory:
    """
    Creates OperationResponse instances, either from scratch or from an existing response
    """

    def create(
        self,
        status_code: int,
        headers: HttpHeaders | Mapping[str, str | list[str]] | Iterable[tuple[str, str]] | None,
        content: bytes | None,
    ) -> OperationResponse:
        return OperationResponse(status_code=int(status_code), headers=HttpHeaders.of(headers), content=content or b"")

    def create_from(self, original: OperationResponse, content: bytes) -> OperationResponse:
        """
        Copies original with new content

        If original has a Content-Length header it is updated to match the new content.
        """
        headers = original.headers
        if headers.content_length is not None:
            headers = headers.with_values(constants.CONTENT_LENGTH, [str(len(content))])
        return OperationResponse(status_code=original.status_code, headers=headers, content=content)

    def create_from_headers(
        self,
        original: OperationResponse,
        headers: HttpHeaders | Mapping[str, str | list[str]] | Iterable[tuple[str, str]],
    ) -> OperationResponse:
        return OperationResponse(
            status_code=original.status_code, headers=HttpHeaders.of(headers), content=original.content
        )
