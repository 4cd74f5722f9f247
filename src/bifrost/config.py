"""Bridge configuration model, provider registry and shared constants."""
from pydantic import BaseModel, ConfigDict, Field

# Supported providers, keyed by lower-cased identifier
PROVIDERS = {
    "s3": "Simple Storage Service",
    "gcs": "Google Cloud Storage",
    "pinata": "Pinata IPFS Storage",
}

# Upload option keys
OPT_ACL = "acl"
OPT_CONTENT_TYPE = "content_type"
OPT_METADATA = "metadata"

# Access control values accepted under OPT_ACL
ACL_PUBLIC_READ = "public-read"
ACL_PRIVATE = "private"

# Preview URL templates
URL_SIMPLE_STORAGE_SERVICE = "https://{bucket}.s3.{region}.amazonaws.com/{key}"
URL_GOOGLE_CLOUD_STORAGE = "https://storage.googleapis.com/{bucket}/{key}"
URL_PINATA_GATEWAY = "https://gateway.pinata.cloud/ipfs/{cid}"

# Pinata API
URL_PINATA_PIN_FILE = "https://api.pinata.cloud/pinning/pinFileToIPFS"


class BridgeConfig(BaseModel):
    """
    Everything any provider might need to open a bridge.

    Providers only read the fields they use; the rest are echoed back
    through ``config()``.

    Usage:
        from bifrost import BridgeConfig, new_rainbow_bridge
        bridge = new_rainbow_bridge(BridgeConfig(provider="s3", default_bucket="assets"))
    """
    model_config = ConfigDict(frozen=True)

    provider: str = Field(description="Provider identifier, e.g. s3, gcs or pinata")
    default_bucket: str = Field(default="", description="Bucket used by every upload")
    region: str = Field(default="", description="Provider region")
    access_key: str = Field(default="", description="Static access key (S3)")
    secret_key: str = Field(default="", description="Static secret key (S3)")
    credentials_file: str = Field(default="", description="Service account file (GCS)")
    project: str = Field(default="", description="Project identifier (GCS)")
    default_timeout: int = Field(default=0, description="Per-call timeout in seconds, 0 for none")
    enable_debug: bool = False
    public_read: bool = Field(default=False, description="Grant public read on uploads by default")
    use_async: bool = False
    pinata_jwt: str = Field(default="", description="Pinata JWT bearer token")
