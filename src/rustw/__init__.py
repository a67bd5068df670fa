"""rustw - configuration for the rustw web frontend."""

from rustw.config import RustwConfig, load_config

__all__ = [
    "RustwConfig",
    "load_config",
]
