from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FileType(str, Enum):
    REGULAR = "REGULAR"
    DIR = "DIR"


class _Wire(BaseModel):
    # File service speaks camelCase; accept either spelling on input.
    model_config = ConfigDict(populate_by_name=True)


class FileMeta(_Wire):
    """Metadata of one file or directory on a file-service instance."""
    full_name: str = Field(alias="fullName")
    type: FileType
    size: int | None = None
    last_update_on: int | None = Field(default=None, alias="lastUpdateOn")


class BooleanResponse(_Wire):
    result: bool


class TextFile(_Wire):
    """A text file together with its metadata."""
    meta: FileMeta
    text: str


class SaveFileResponse(_Wire):
    """Result of saving a text file; `message` explains a rejected save."""
    meta: FileMeta
    message: str | None = None


class LoginResponse(_Wire):
    user: Any
    token: str
