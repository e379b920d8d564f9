"""ResourceRegistry — static, URI-addressed files read fresh on every call."""

from __future__ import annotations

import logging
import mimetypes
from pathlib import Path

from mcpsample.protocol.errors import ResourceNotFoundError
from mcpsample.protocol.models import ResourceDescriptor, TextContent

logger = logging.getLogger(__name__)

DEFAULT_RESOURCES_DIR = Path(__file__).parent / "data"

RESOURCES: tuple[ResourceDescriptor, ...] = (
    ResourceDescriptor(
        uri="file:///sample.txt",
        name="Sample Text File",
        description="A sample text file for demonstration",
        mime_type="text/plain",
        filename="sample.txt",
    ),
    ResourceDescriptor(
        uri="file:///data.json",
        name="Sample JSON Data",
        description="Sample JSON data for testing",
        mime_type="application/json",
        filename="data.json",
    ),
)

_MEDIA_TYPES = {
    ".txt": "text/plain",
    ".json": "application/json",
}


def media_type_for(filename: str) -> str:
    """Pick a content type from the file extension."""
    suffix = Path(filename).suffix.lower()
    if suffix in _MEDIA_TYPES:
        return _MEDIA_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or "application/octet-stream"


class ResourceRegistry:
    """Serves the fixed resource table from *base_dir*.

    Content is never cached, so edits to the backing files show up on the
    next read.
    """

    def __init__(self, base_dir: Path | None = None) -> None:
        self._base_dir = base_dir or DEFAULT_RESOURCES_DIR
        self._by_uri = {r.uri: r for r in RESOURCES}
        self._by_filename = {r.filename: r for r in RESOURCES}

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    def list_resources(self) -> list[ResourceDescriptor]:
        return list(RESOURCES)

    def read_resource(self, uri: str) -> list[TextContent]:
        descriptor = self._by_uri.get(uri)
        if descriptor is None:
            raise ResourceNotFoundError(f"Resource not found: {uri}")
        text = self._read_bytes(descriptor).decode("utf-8")
        return [TextContent(text=text, mime_type=descriptor.mime_type)]

    def download(self, filename: str) -> tuple[bytes, str]:
        """Return the raw bytes and media type of a backing file."""
        descriptor = self._by_filename.get(filename)
        if descriptor is None:
            raise ResourceNotFoundError(f"File not found: {filename}")
        return self._read_bytes(descriptor), media_type_for(descriptor.filename)

    def _read_bytes(self, descriptor: ResourceDescriptor) -> bytes:
        path = self._base_dir / descriptor.filename
        try:
            return path.read_bytes()
        except OSError as exc:
            logger.error("Cannot read resource file %s: %s", path, exc)
            raise ResourceNotFoundError(f"Resource not found: {descriptor.uri}") from exc
