"""
Rainbow bridge capability set shared by every provider adapter.

An adapter owns exactly one authenticated native client. The bridge is
connected while that client is set and disconnected once ``disconnect()``
clears it; there is no reconnection.
"""
import logging
import os
from abc import ABC, abstractmethod
from typing import Any, BinaryIO, List, Mapping, Optional

from bifrost.config import PROVIDERS, BridgeConfig
from bifrost.errors import BifrostError, ErrorCode
from bifrost.schemas import UploadedFile

logger = logging.getLogger(__name__)


class RainbowBridge(ABC):
    """Base class for provider adapters (extended by s3, gcs and pinata)"""

    provider_key: str = ""

    def __init__(self, config: BridgeConfig, client: Any):
        self.provider = PROVIDERS.get(config.provider.lower(), config.provider)
        self.default_bucket = config.default_bucket
        self.region = config.region
        self.access_key = config.access_key
        self.secret_key = config.secret_key
        self.credentials_file = config.credentials_file
        self.project = config.project
        self.default_timeout = config.default_timeout
        self.enable_debug = config.enable_debug
        self.public_read = config.public_read
        self.use_async = config.use_async
        self.pinata_jwt = config.pinata_jwt
        self.client = client

    @classmethod
    @abstractmethod
    def from_config(cls, config: BridgeConfig) -> "RainbowBridge":
        """Authenticate against the provider and return a connected bridge."""

    @abstractmethod
    def upload_file(
        self, path: str, filename: str, options: Optional[Mapping[str, Any]] = None
    ) -> UploadedFile:
        """
        Upload the local file at ``path`` under the name ``filename``.

        Raises :class:`BifrostError` with ``CLIENT_ERROR`` when disconnected,
        ``BAD_REQUEST`` when ``path`` does not exist and
        ``FILE_OPERATION_FAILED`` for any read, write or confirmation failure.
        """

    def upload_folder(
        self, path: str, options: Optional[Mapping[str, Any]] = None
    ) -> List[UploadedFile]:
        """Folder uploads are not implemented; nothing is read or sent."""
        logger.debug(f"upload_folder is not implemented for {self.provider}, skipping {path}")
        return []

    def config(self) -> BridgeConfig:
        """Snapshot of the settings this bridge is bound to."""
        return BridgeConfig(
            provider=self.provider_key,
            default_bucket=self.default_bucket,
            region=self.region,
            access_key=self.access_key,
            secret_key=self.secret_key,
            credentials_file=self.credentials_file,
            project=self.project,
            default_timeout=self.default_timeout,
            enable_debug=self.enable_debug,
            public_read=self.public_read,
            use_async=self.use_async,
            pinata_jwt=self.pinata_jwt,
        )

    def disconnect(self) -> None:
        """Drop the native client. Safe to call more than once."""
        self.client = None

    def is_connected(self) -> bool:
        return self.client is not None

    @property
    def timeout(self) -> Optional[int]:
        """Per-call timeout in seconds, None when unbounded."""
        return self.default_timeout if self.default_timeout > 0 else None

    def _require_client(self) -> Any:
        # Read once so a concurrent disconnect cannot swap it mid-upload
        client = self.client
        if client is None:
            raise BifrostError(f"no active {self.provider} client", ErrorCode.CLIENT_ERROR)
        return client

    def _open_source(self, path: str) -> BinaryIO:
        if not os.path.exists(path):
            raise BifrostError(f"file does not exist: {path}", ErrorCode.BAD_REQUEST)
        try:
            return open(path, "rb")
        except OSError as e:
            raise BifrostError(e, ErrorCode.FILE_OPERATION_FAILED) from e
