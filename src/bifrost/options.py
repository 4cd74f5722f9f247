"""
Per-upload option resolution.

Options are merged permissively on top of the bridge defaults: unknown keys
and values of the wrong type are dropped without raising. Every adapter goes
through :func:`resolve_upload_options` so that behaviour lives in one place.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from bifrost.config import ACL_PRIVATE, ACL_PUBLIC_READ, OPT_ACL, OPT_CONTENT_TYPE, OPT_METADATA

logger = logging.getLogger(__name__)


@dataclass
class UploadOptions:
    """Effective settings for a single upload."""
    acl: Optional[str] = None
    content_type: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    @property
    def public(self) -> bool:
        return self.acl == ACL_PUBLIC_READ


def _is_string_mapping(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    )


def resolve_upload_options(
    options: Optional[Mapping[str, Any]], public_read: bool = False
) -> UploadOptions:
    """
    Merge caller options over the bridge's public-read default.

    :param options: Caller supplied options, applied in iteration order.
    :param public_read: The bridge default; grants public read when set.
    :return: The resolved :class:`UploadOptions`. ``acl`` stays ``None`` when
        neither the default nor the options ask for an access control.
    """
    resolved = UploadOptions(acl=ACL_PUBLIC_READ if public_read else None)

    for key, value in (options or {}).items():
        if key == OPT_ACL:
            if isinstance(value, str) and value in (ACL_PUBLIC_READ, ACL_PRIVATE):
                resolved.acl = value
            else:
                logger.debug(f"Ignoring unsupported acl value: {value!r}")
        elif key == OPT_CONTENT_TYPE:
            if isinstance(value, str):
                resolved.content_type = value
            else:
                logger.debug(f"Ignoring non-string content type: {value!r}")
        elif key == OPT_METADATA:
            if _is_string_mapping(value):
                resolved.metadata = dict(value)
            else:
                logger.debug("Ignoring metadata that is not a mapping of strings")
        else:
            logger.debug(f"Ignoring unknown upload option: {key}")

    return resolved
