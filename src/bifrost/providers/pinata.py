"""Pinata IPFS pinning adapter."""
import json
import logging
from typing import Any, Mapping, Optional

import requests

from bifrost.config import URL_PINATA_GATEWAY, URL_PINATA_PIN_FILE, BridgeConfig
from bifrost.errors import BifrostError, ErrorCode
from bifrost.options import resolve_upload_options
from bifrost.providers.base import RainbowBridge
from bifrost.schemas import UploadedFile
from bifrost.utils.decorators import log_upload

logger = logging.getLogger(__name__)


class PinataIPFSStorage(RainbowBridge):
    """
    Pins files to IPFS through Pinata.

    IPFS content is public, so access control options are accepted and
    ignored. Buckets do not exist here; default_bucket is only echoed back.
    """

    provider_key = "pinata"

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "PinataIPFSStorage":
        if not config.pinata_jwt:
            raise BifrostError("jwt is required for authentication", ErrorCode.UNAUTHORIZED)

        session = requests.Session()
        session.headers.update({"Authorization": f"Bearer {config.pinata_jwt}"})
        logger.info("Pinata bridge ready")
        return cls(config, session)

    @log_upload
    def upload_file(
        self, path: str, filename: str, options: Optional[Mapping[str, Any]] = None
    ) -> UploadedFile:
        """Pin a file; the pin response carries the CID and size."""
        client = self._require_client()

        resolved = resolve_upload_options(options, self.public_read)
        pinata_metadata = {"name": filename, "keyvalues": resolved.metadata}

        with self._open_source(path) as body:
            logger.debug(f"Pinning {path} as {filename}")
            try:
                response = client.post(
                    URL_PINATA_PIN_FILE,
                    files={"file": (filename, body, resolved.content_type or "application/octet-stream")},
                    data={"pinataMetadata": json.dumps(pinata_metadata)},
                    timeout=self.timeout,
                )
                response.raise_for_status()
                payload = response.json()
                cid = payload["IpfsHash"]
            except (requests.RequestException, ValueError, KeyError, TypeError) as e:
                logger.error(f"Error pinning to Pinata: {str(e)}")
                raise BifrostError(e, ErrorCode.FILE_OPERATION_FAILED) from e

        logger.info(f"Pinned {path} to IPFS as {cid}")
        return UploadedFile(
            name=filename,
            bucket=self.default_bucket,
            path=path,
            preview=URL_PINATA_GATEWAY.format(cid=cid),
            size=payload.get("PinSize", 0),
            provider_object=payload,
        )

    def disconnect(self) -> None:
        session, self.client = self.client, None
        if session is not None:
            session.close()
