"""Google Cloud Storage adapter."""
import logging
from typing import Any, Mapping, Optional

import requests
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import storage

from bifrost.config import ACL_PRIVATE, ACL_PUBLIC_READ, URL_GOOGLE_CLOUD_STORAGE, BridgeConfig
from bifrost.errors import BifrostError, ErrorCode
from bifrost.options import resolve_upload_options
from bifrost.providers.base import RainbowBridge
from bifrost.schemas import UploadedFile
from bifrost.utils.decorators import log_upload

logger = logging.getLogger(__name__)

# bifrost ACL values -> GCS predefined ACLs
PREDEFINED_ACLS = {
    ACL_PUBLIC_READ: "publicRead",
    ACL_PRIVATE: "private",
}


class GoogleCloudStorage(RainbowBridge):
    """Ships files to a Google Cloud Storage bucket"""

    provider_key = "gcs"

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "GoogleCloudStorage":
        """
        Authenticate with the service account file when one is given,
        otherwise with application default credentials.
        """
        project = config.project or None
        try:
            if config.credentials_file:
                client = storage.Client.from_service_account_json(config.credentials_file, project=project)
            else:
                client = storage.Client(project=project)
        except (GoogleAuthError, OSError, ValueError) as e:
            raise BifrostError(e, ErrorCode.UNAUTHORIZED) from e

        logger.info(f"GCS bridge ready for bucket '{config.default_bucket}'")
        return cls(config, client)

    @log_upload
    def upload_file(
        self, path: str, filename: str, options: Optional[Mapping[str, Any]] = None
    ) -> UploadedFile:
        """
        Upload a file to the default bucket and reload the blob to confirm it.

        Note: requires that default_bucket be set in BridgeConfig.
        """
        client = self._require_client()

        resolved = resolve_upload_options(options, self.public_read)
        blob = client.bucket(self.default_bucket).blob(filename)
        if resolved.metadata:
            blob.metadata = resolved.metadata

        with self._open_source(path) as body:
            logger.debug(f"Uploading {path} to gs://{self.default_bucket}/{filename}")
            try:
                blob.upload_from_file(
                    body,
                    content_type=resolved.content_type,
                    predefined_acl=PREDEFINED_ACLS.get(resolved.acl),
                    timeout=self.timeout,
                )
            except (GoogleAPIError, GoogleAuthError, requests.RequestException, OSError) as e:
                logger.error(f"Error uploading to GCS: {str(e)}")
                raise BifrostError(e, ErrorCode.FILE_OPERATION_FAILED) from e

        try:
            blob.reload(timeout=self.timeout)
        except (GoogleAPIError, GoogleAuthError, requests.RequestException) as e:
            logger.error(f"Error reading back gs://{self.default_bucket}/{filename}: {str(e)}")
            raise BifrostError(e, ErrorCode.FILE_OPERATION_FAILED) from e

        logger.info(f"Uploaded {path} to GCS as {filename}")
        return UploadedFile(
            name=filename,
            bucket=self.default_bucket,
            path=path,
            preview=URL_GOOGLE_CLOUD_STORAGE.format(bucket=self.default_bucket, key=filename),
            size=blob.size or 0,
            provider_object=blob,
        )
