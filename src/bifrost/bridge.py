"""
Rainbow bridge factory.

Validates a BridgeConfig and hands it to the adapter registered for its
provider. Every failure is raised as a BifrostError before any adapter is
built, so no partially constructed bridge ever escapes.
"""
import logging
from typing import Dict, Type

from bifrost.config import PROVIDERS, BridgeConfig
from bifrost.errors import BifrostError, ErrorCode
from bifrost.providers import GoogleCloudStorage, PinataIPFSStorage, RainbowBridge, SimpleStorageService

logger = logging.getLogger(__name__)

BRIDGE_CLASSES: Dict[str, Type[RainbowBridge]] = {
    "s3": SimpleStorageService,
    "gcs": GoogleCloudStorage,
    "pinata": PinataIPFSStorage,
}


def new_rainbow_bridge(config: BridgeConfig) -> RainbowBridge:
    """
    Return a connected bridge for the provider named in ``config``.

    :param config: The bridge configuration.
    :raises BifrostError: ``BAD_REQUEST`` for a missing or malformed config or
        an unsupported provider, ``UNAUTHORIZED`` when the provider rejects
        the supplied credentials.
    """
    if config is None:
        raise BifrostError("config is nil", ErrorCode.BAD_REQUEST)

    if not isinstance(config, BridgeConfig):
        raise BifrostError(f"invalid config type: {type(config).__name__}", ErrorCode.BAD_REQUEST)

    if not config.provider:
        raise BifrostError("no provider specified", ErrorCode.BAD_REQUEST)

    provider = config.provider.lower()
    if provider not in PROVIDERS:
        raise BifrostError(f"invalid provider: {config.provider}", ErrorCode.BAD_REQUEST)

    # Some providers (e.g. pinata) have no notion of a bucket
    if not config.default_bucket and config.enable_debug:
        logger.warning(
            f"No bucket specified for provider {PROVIDERS[provider]}. "
            "This might cause errors or require you to specify a bucket for each operation."
        )

    bridge_class = BRIDGE_CLASSES.get(provider)
    if bridge_class is None:
        raise BifrostError(f"invalid provider: {config.provider}", ErrorCode.BAD_REQUEST)

    logger.info(f"Creating rainbow bridge for provider: {PROVIDERS[provider]}")
    return bridge_class.from_config(config)
