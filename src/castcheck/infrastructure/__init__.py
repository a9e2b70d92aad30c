"""Infrastructure layer: file formats and external inputs."""

from castcheck.infrastructure.adapters import JSONSymbolLoader, load_config

__all__ = ["JSONSymbolLoader", "load_config"]
