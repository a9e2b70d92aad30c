"""pyproject.toml configuration adapter.

Reads the [tool.castcheck] table into an AnalysisConfig.
"""

from __future__ import annotations

import logging
import tomllib
from types import MappingProxyType
from typing import TYPE_CHECKING

from castcheck.domain.exceptions import ConfigError
from castcheck.domain.model.configuration import AnalysisConfig
from castcheck.domain.model.enums import Language, Severity

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

logger = logging.getLogger(__name__)

_KNOWN_KEYS = frozenset(
    {
        "marker_attribute",
        "default_member_languages",
        "analyze_generated_code",
        "disabled_rules",
        "severity_overrides",
        "max_workers",
    }
)


def load_config(
    path: Path,
    *,
    known_rule_ids: frozenset[str] | None = None,
) -> AnalysisConfig:
    """Load configuration from a pyproject.toml file.

    A file without a [tool.castcheck] table yields the default config.

    Args:
        path: pyproject.toml to read
        known_rule_ids: Valid rule ids. None = accept any id.

    Returns:
        AnalysisConfig

    Raises:
        ConfigError: If the file is unreadable or a value is invalid
    """
    try:
        with path.open("rb") as fh:
            document = tomllib.load(fh)
    except FileNotFoundError as e:
        raise ConfigError(str(path), "file not found") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(str(path), f"invalid TOML: {e}") from e

    table = document.get("tool", {}).get("castcheck")
    if table is None:
        logger.debug("No [tool.castcheck] table in %s, using defaults", path)
        return AnalysisConfig()

    logger.debug("Loaded [tool.castcheck] from %s", path)
    return config_from_mapping(table, known_rule_ids=known_rule_ids)


def config_from_mapping(
    table: Mapping[str, object],
    *,
    known_rule_ids: frozenset[str] | None = None,
) -> AnalysisConfig:
    """Build an AnalysisConfig from a plain mapping.

    Args:
        table: Keys of the [tool.castcheck] table
        known_rule_ids: Valid rule ids. None = accept any id.

    Returns:
        AnalysisConfig

    Raises:
        ConfigError: On unknown keys, wrong types or unknown rule ids
    """
    unknown = sorted(set(table) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(unknown[0], "unknown key")

    kwargs: dict[str, object] = {}

    if "marker_attribute" in table:
        kwargs["marker_attribute"] = _str(table, "marker_attribute")

    if "default_member_languages" in table:
        kwargs["default_member_languages"] = frozenset(
            parse_language(name) for name in _str_list(table, "default_member_languages")
        )

    if "analyze_generated_code" in table:
        value = table["analyze_generated_code"]
        if not isinstance(value, bool):
            raise ConfigError("analyze_generated_code", "must be true or false")
        kwargs["analyze_generated_code"] = value

    if "disabled_rules" in table:
        disabled = frozenset(_str_list(table, "disabled_rules"))
        _check_rule_ids("disabled_rules", disabled, known_rule_ids)
        kwargs["disabled_rules"] = disabled

    if "severity_overrides" in table:
        raw = table["severity_overrides"]
        if not isinstance(raw, dict):
            raise ConfigError("severity_overrides", "must be a table of rule id = severity")
        _check_rule_ids("severity_overrides", frozenset(raw), known_rule_ids)
        kwargs["severity_overrides"] = MappingProxyType(
            {rule_id: parse_severity(value) for rule_id, value in raw.items()}
        )

    if "max_workers" in table:
        value = table["max_workers"]
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError("max_workers", "must be an integer")
        kwargs["max_workers"] = value

    try:
        return AnalysisConfig(**kwargs)  # type: ignore[arg-type]
    except (ValueError, TypeError) as e:
        raise ConfigError("tool.castcheck", str(e)) from e


def parse_severity(value: object) -> Severity:
    """Parse "error"/"warning"/"info" (any case).

    Raises:
        ConfigError: On any other value
    """
    if isinstance(value, str):
        try:
            return Severity[value.upper()]
        except KeyError:
            pass
    allowed = ", ".join(s.name.lower() for s in Severity)
    raise ConfigError("severity", f"{value!r} is not one of {allowed}")


def parse_language(value: str) -> Language:
    """Parse a language by display name ("C#") or member name ("CSHARP", any case).

    Raises:
        ConfigError: On unknown languages
    """
    for language in Language:
        if value == language.value or value.upper() == language.name:
            return language
    allowed = ", ".join(repr(lang.value) for lang in Language)
    raise ConfigError("default_member_languages", f"{value!r} is not one of {allowed}")


def _str(table: Mapping[str, object], key: str) -> str:
    value = table[key]
    if not isinstance(value, str) or not value:
        raise ConfigError(key, "must be a non-empty string")
    return value


def _str_list(table: Mapping[str, object], key: str) -> list[str]:
    value = table[key]
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise ConfigError(key, "must be a list of non-empty strings")
    return value


def _check_rule_ids(
    key: str,
    rule_ids: frozenset[str],
    known_rule_ids: frozenset[str] | None,
) -> None:
    if known_rule_ids is None:
        return
    unknown = sorted(rule_ids - known_rule_ids)
    if unknown:
        raise ConfigError(key, f"unknown rule id(s): {', '.join(unknown)}")
