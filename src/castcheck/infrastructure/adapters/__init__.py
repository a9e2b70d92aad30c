"""Infrastructure adapters for external interfaces."""

from castcheck.infrastructure.adapters.config_loader import (
    config_from_mapping,
    load_config,
    parse_language,
    parse_severity,
)
from castcheck.infrastructure.adapters.json_loader import JSONSymbolLoader

__all__ = [
    "JSONSymbolLoader",
    "load_config",
    "config_from_mapping",
    "parse_language",
    "parse_severity",
]
