"""bifrost: a rainbow bridge for shipping files to cloud storage services."""
import logging

from bifrost.bridge import new_rainbow_bridge
from bifrost.config import (
    ACL_PRIVATE,
    ACL_PUBLIC_READ,
    OPT_ACL,
    OPT_CONTENT_TYPE,
    OPT_METADATA,
    PROVIDERS,
    BridgeConfig,
)
from bifrost.errors import BifrostError, ErrorCode
from bifrost.providers import RainbowBridge
from bifrost.schemas import UploadedFile

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "new_rainbow_bridge",
    "BridgeConfig",
    "RainbowBridge",
    "UploadedFile",
    "BifrostError",
    "ErrorCode",
    "PROVIDERS",
    "OPT_ACL",
    "OPT_CONTENT_TYPE",
    "OPT_METADATA",
    "ACL_PUBLIC_READ",
    "ACL_PRIVATE",
]
