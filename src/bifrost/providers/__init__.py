"""Provider adapters, one per supported storage service."""
from bifrost.providers.base import RainbowBridge
from bifrost.providers.gcs import GoogleCloudStorage
from bifrost.providers.pinata import PinataIPFSStorage
from bifrost.providers.s3 import SimpleStorageService

__all__ = [
    "RainbowBridge",
    "SimpleStorageService",
    "GoogleCloudStorage",
    "PinataIPFSStorage",
]
