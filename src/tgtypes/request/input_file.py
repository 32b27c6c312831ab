from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, BeforeValidator, Discriminator, Tag

from tgtypes.model.tagging import tag_resolver


class InputFileId(BaseModel):
    """A file that Telegram can already reach: a file_id from an earlier upload, or an HTTP URL."""
    source: Literal["remote"] = "remote"
    file_id_or_url: str

    @property
    def is_upload(self) -> bool:
        return False


class InputFilePath(BaseModel):
    """A local file that has to be uploaded with multipart/form-data."""
    source: Literal["path"] = "path"
    path: Path

    @property
    def is_upload(self) -> bool:
        return True

    @property
    def filename(self) -> str:
        return self.path.name

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()


class InputFileBytes(BaseModel):
    """An in-memory buffer that has to be uploaded with multipart/form-data."""
    source: Literal["bytes"] = "bytes"
    filename: str
    content: bytes

    @property
    def is_upload(self) -> bool:
        return True

    def read_bytes(self) -> bytes:
        return self.content


def _from_wire(value: Any) -> Any:
    # on the wire a remote file is just its id or URL
    if isinstance(value, str):
        return {"source": "remote", "file_id_or_url": value}
    if isinstance(value, Path):
        return {"source": "path", "path": value}
    return value


InputFile = Annotated[
    Union[
        Annotated[InputFileId, Tag("remote")],
        Annotated[InputFilePath, Tag("path")],
        Annotated[InputFileBytes, Tag("bytes")],
    ],
    Discriminator(
        tag_resolver("source", ("remote", "path", "bytes"), fallback = "remote"),
        custom_error_type = "invalid_input_file",
        custom_error_message = "Input file must be a file id, a URL, a path or a byte buffer",
    ),
    BeforeValidator(_from_wire),
]


def file_id(file_id_or_url: str) -> InputFileId:
    return InputFileId(file_id_or_url = file_id_or_url)


def from_path(path: str | Path) -> InputFilePath:
    return InputFilePath(path = Path(path))


def from_bytes(filename: str, content: bytes) -> InputFileBytes:
    return InputFileBytes(filename = filename, content = content)
