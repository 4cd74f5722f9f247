"""AWS S3 adapter."""
import logging
from typing import Any, Mapping, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from bifrost.config import URL_SIMPLE_STORAGE_SERVICE, BridgeConfig
from bifrost.errors import BifrostError, ErrorCode
from bifrost.options import resolve_upload_options
from bifrost.providers.base import RainbowBridge
from bifrost.schemas import UploadedFile
from bifrost.utils.decorators import log_upload

try:
    from mypy_boto3_s3 import S3Client
except ImportError:
    ...

logger = logging.getLogger(__name__)


class SimpleStorageService(RainbowBridge):
    """Ships files to an S3 bucket"""

    provider_key = "s3"

    @classmethod
    def from_config(cls, config: BridgeConfig) -> "SimpleStorageService":
        """
        Create an S3 client from static keys when both are set, otherwise
        from the shared AWS configuration (environment, profile, role).
        """
        client_config = None
        if config.default_timeout > 0:
            client_config = Config(
                connect_timeout=config.default_timeout,
                read_timeout=config.default_timeout,
                retries={"total_max_attempts": 1},
            )

        try:
            if config.access_key and config.secret_key:
                session = boto3.session.Session(
                    aws_access_key_id=config.access_key,
                    aws_secret_access_key=config.secret_key,
                    region_name=config.region or None,
                )
            else:
                session = boto3.session.Session(region_name=config.region or None)
            client: "S3Client" = session.client("s3", config=client_config)
        except (BotoCoreError, ClientError) as e:
            raise BifrostError(e, ErrorCode.UNAUTHORIZED) from e

        logger.info(f"S3 bridge ready for bucket '{config.default_bucket}' in region '{config.region}'")
        return cls(config, client)

    @log_upload
    def upload_file(
        self, path: str, filename: str, options: Optional[Mapping[str, Any]] = None
    ) -> UploadedFile:
        """
        Upload a file to the default bucket and confirm it with a HEAD request.

        Note: requires that default_bucket be set in BridgeConfig. A
        default_timeout bounds every socket connect and read and disables
        botocore retries; the put and head calls are not capped as a whole.
        """
        client = self._require_client()

        params = {"Bucket": self.default_bucket, "Key": filename}
        resolved = resolve_upload_options(options, self.public_read)
        if resolved.acl:
            params["ACL"] = resolved.acl
        if resolved.content_type:
            params["ContentType"] = resolved.content_type
        if resolved.metadata:
            params["Metadata"] = resolved.metadata

        with self._open_source(path) as body:
            logger.debug(f"Uploading {path} to s3://{self.default_bucket}/{filename}")
            try:
                client.put_object(Body=body, **params)
            except (BotoCoreError, ClientError) as e:
                logger.error(f"Error uploading to S3: {str(e)}")
                raise BifrostError(e, ErrorCode.FILE_OPERATION_FAILED) from e

        try:
            head = client.head_object(Bucket=self.default_bucket, Key=filename)
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error reading back s3://{self.default_bucket}/{filename}: {str(e)}")
            raise BifrostError(e, ErrorCode.FILE_OPERATION_FAILED) from e

        logger.info(f"Uploaded {path} to S3 as {filename}")
        return UploadedFile(
            name=filename,
            bucket=self.default_bucket,
            path=path,
            preview=URL_SIMPLE_STORAGE_SERVICE.format(
                bucket=self.default_bucket, region=self.region, key=filename
            ),
            size=head.get("ContentLength", 0),
            provider_object=head,
        )
