"""
Test saving and loading converted responses
"""

import logging
import os
import shutil
import tempfile

import pytest
import yaml

from restdocs_testclient.factory import OperationResponseFactory
from restdocs_testclient.persistence import YamlOperationPersister


class TempDirectory:
    _temp_dir: str | None = None
    _prefix: str

    def __init__(self, prefix: str = "restdocs-testclient-test-"):
        self._prefix = prefix

    def __enter__(self):
        self._temp_dir = tempfile.mkdtemp(prefix=self._prefix)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        shutil.rmtree(self._temp_dir)

    @property
    def path(self):
        return self._temp_dir


factory = OperationResponseFactory()


def test_save_and_load_text_response():
    response = factory.create(
        200,
        [
            ("Content-Type", "text/plain; charset=utf-8"),
            ("Content-Length", "13"),
            ("Set-Cookie", "a=1"),
            ("Set-Cookie", "b=2"),
        ],
        b"Hello, World!",
    )

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("hello", response)

        with open(os.path.join(temp_dir.path, "hello", "response.yaml"), encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        assert saved["version"] == 1
        assert saved["response"]["status"] == {"code": 200, "message": "OK"}
        assert saved["response"]["headers"]["Set-Cookie"] == ["a=1", "b=2"]
        assert saved["response"]["body"]["string"] == "Hello, World!"

        loaded = persister.load_operation("hello")
        assert loaded == response
        assert list(loaded.headers) == ["Content-Type", "Content-Length", "Set-Cookie"]


def test_save_and_load_json_response():
    response = factory.create(201, {"Content-Type": "application/json"}, b'{"id": 1}')

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("things/create", response)

        assert os.path.exists(os.path.join(temp_dir.path, "things_create", "response.yaml"))
        assert persister.load_operation("/things/create/") == response


def test_save_and_load_binary_response():
    response = factory.create(200, {"Content-Type": "image/png"}, b"\x89PNG\r\n\x1a\n")

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("image", response)

        with open(persister.get_operation_file_path("image"), encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        assert "base64" in saved["response"]["body"]
        assert persister.load_operation("image") == response


def test_save_and_load_non_standard_status():
    response = factory.create(210, None, None)

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("custom-status", response)

        with open(persister.get_operation_file_path("custom-status"), encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        assert saved["response"]["status"] == {"code": 210, "message": ""}
        loaded = persister.load_operation("custom-status")
        assert loaded.status_code == 210
        assert loaded.status is None
        assert loaded == response


def test_invalid_text_body_saved_as_base64():
    response = factory.create(200, {"Content-Type": "text/plain; charset=utf-8"}, b"\xff\xfe")

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("bad-text", response)

        assert persister.load_operation("bad-text") == response


def test_custom_text_content_types():
    response = factory.create(200, {"Content-Type": "application/hal+json"}, b'{"_links": {}}')

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path, text_content_types=["application/hal+json"])
        persister.save_operation("hal", response)

        with open(persister.get_operation_file_path("hal"), encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        assert saved["response"]["body"]["string"] == '{"_links": {}}'


def test_load_missing_operation_returns_none():
    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)

        assert persister.load_operation("missing") is None


@pytest.mark.parametrize("name", ["", "/", "//"])
def test_invalid_operation_name(name: str):
    persister = YamlOperationPersister(".restdocs")

    with pytest.raises(ValueError):
        persister.get_operation_file_path(name)


def test_unknown_charset_saved_as_base64():
    response = factory.create(200, {"Content-Type": "text/plain; charset=x-user-defined-nope"}, b"hello")

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("unknown-charset", response)

        with open(persister.get_operation_file_path("unknown-charset"), encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        assert "base64" in saved["response"]["body"]
        assert persister.load_operation("unknown-charset") == response


def test_text_that_does_not_re_encode_to_same_bytes_saved_as_base64():
    # decoding drops the big-endian BOM choice, so encoding gives back little-endian bytes
    response = factory.create(200, {"Content-Type": "text/plain; charset=utf-16"}, "\ufeffhi".encode("utf-16-be"))

    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("utf-16", response)

        with open(persister.get_operation_file_path("utf-16"), encoding="utf-8") as f:
            saved = yaml.safe_load(f)
        assert "base64" in saved["response"]["body"]
        assert persister.load_operation("utf-16") == response


def test_names_sharing_a_directory_log_a_warning(caplog: pytest.LogCaptureFixture):
    with TempDirectory() as temp_dir:
        persister = YamlOperationPersister(temp_dir.path)
        persister.save_operation("a/b", factory.create(200, None, b"first"))
        persister.save_operation("a/b", factory.create(200, None, b"again"))
        assert "overwrites" not in caplog.text

        with caplog.at_level(logging.WARNING, logger="restdocs_testclient.persistence"):
            persister.save_operation("a_b", factory.create(201, None, b"second"))

        assert "Response for a_b overwrites response for a/b" in caplog.text
        assert persister.load_operation("a/b").status_code == 201
