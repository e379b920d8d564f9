"""Tests for ResourceRegistry."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path

from mcpsample.protocol.errors import ResourceNotFoundError
from mcpsample.resources.registry import DEFAULT_RESOURCES_DIR, ResourceRegistry, media_type_for


@pytest.fixture
def resource_dir(tmp_path: Path) -> Path:
    (tmp_path / "sample.txt").write_text("hello sample", encoding="utf-8")
    (tmp_path / "data.json").write_text('{"k": 1}', encoding="utf-8")
    return tmp_path


class TestListResources:
    def test_fixed_order(self) -> None:
        uris = [r.uri for r in ResourceRegistry().list_resources()]
        assert uris == ["file:///sample.txt", "file:///data.json"]

    def test_mime_types(self) -> None:
        types = [r.mime_type for r in ResourceRegistry().list_resources()]
        assert types == ["text/plain", "application/json"]


class TestReadResource:
    def test_read_sample(self, resource_dir: Path) -> None:
        [block] = ResourceRegistry(resource_dir).read_resource("file:///sample.txt")
        assert block.text == "hello sample"
        assert block.mime_type == "text/plain"

    def test_read_json(self, resource_dir: Path) -> None:
        [block] = ResourceRegistry(resource_dir).read_resource("file:///data.json")
        assert json.loads(block.text) == {"k": 1}
        assert block.mime_type == "application/json"

    def test_packaged_defaults_are_readable(self) -> None:
        registry = ResourceRegistry()
        assert registry.base_dir == DEFAULT_RESOURCES_DIR
        for uri in ("file:///sample.txt", "file:///data.json"):
            [block] = registry.read_resource(uri)
            assert block.text

    @pytest.mark.parametrize(
        "uri",
        ["file:///missing.txt", "file:///SAMPLE.TXT", "sample.txt", "file:///../data.json", ""],
    )
    def test_unknown_uri(self, uri: str) -> None:
        with pytest.raises(ResourceNotFoundError, match="Resource not found"):
            ResourceRegistry().read_resource(uri)

    def test_missing_backing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceNotFoundError) as info:
            ResourceRegistry(tmp_path).read_resource("file:///sample.txt")
        assert info.value.code == -32603

    def test_reads_fresh_each_call(self, resource_dir: Path) -> None:
        registry = ResourceRegistry(resource_dir)
        [first] = registry.read_resource("file:///sample.txt")
        (resource_dir / "sample.txt").write_text("edited", encoding="utf-8")
        [second] = registry.read_resource("file:///sample.txt")
        assert first.text == "hello sample"
        assert second.text == "edited"


class TestDownload:
    def test_download_text(self, resource_dir: Path) -> None:
        content, media_type = ResourceRegistry(resource_dir).download("sample.txt")
        assert content == b"hello sample"
        assert media_type == "text/plain"

    def test_download_json(self, resource_dir: Path) -> None:
        _, media_type = ResourceRegistry(resource_dir).download("data.json")
        assert media_type == "application/json"

    @pytest.mark.parametrize("filename", ["other.txt", "../sample.txt", "sample.txt/"])
    def test_unknown_file(self, resource_dir: Path, filename: str) -> None:
        with pytest.raises(ResourceNotFoundError):
            ResourceRegistry(resource_dir).download(filename)

    def test_missing_backing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ResourceNotFoundError):
            ResourceRegistry(tmp_path).download("data.json")


class TestMediaType:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("a.txt", "text/plain"),
            ("a.JSON", "application/json"),
            ("a.html", "text/html"),
            ("a.unknownext", "application/octet-stream"),
        ],
    )
    def test_by_extension(self, filename: str, expected: str) -> None:
        assert media_type_for(filename) == expected
