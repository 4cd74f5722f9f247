"""Decorator utilities for cross-cutting concerns."""
import time
import logging
import functools
from typing import Any, Callable, TypeVar, cast

from bifrost.errors import BifrostError

# Setup logging
logger = logging.getLogger(__name__)

F = TypeVar('F', bound=Callable[..., Any])

def log_upload(func: F) -> F:
    """Decorator to log how long a bridge upload took.
    
    Args:
        func: A bridge method whose first positional argument after self is
            the local path being uploaded
        
    Returns:
        Decorated method that logs provider, path and duration, plus the
        error code on failure, and re-raises
    """
    @functools.wraps(func)
    def wrapper(bridge, path, *args, **kwargs):
        provider = getattr(bridge, "provider", type(bridge).__name__)
        start_time = time.time()
        try:
            result = func(bridge, path, *args, **kwargs)
        except BifrostError as e:
            duration = time.time() - start_time
            logger.error(f"[{provider}] upload of {path} failed after {duration:.2f}s ({e.error_code.value}): {e.err}")
            raise
        duration = time.time() - start_time
        logger.info(f"[{provider}] uploaded {path} ({result.size} bytes) in {duration:.2f}s")
        return result
    return cast(F, wrapper)
