"""Result records returned by bridge operations."""
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class UploadedFile:
    """A file successfully shipped to a provider."""
    name: str
    bucket: str
    path: str
    preview: str
    size: int
    provider_object: Any = None
