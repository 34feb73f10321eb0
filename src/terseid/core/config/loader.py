"""
Configuration loading with multi-layer merging.

Implements the configuration precedence chain:
    defaults < user config < project config < env vars < explicit overrides

Config files are JSON documents with an ``ids`` section (IdConfig fields)
and a ``resolver`` section (ResolverConfig fields):

    {
        "ids": {"prefix": "bd", "max_hash_length": 10},
        "resolver": {"allowed_prefixes": ["tk"]}
    }

Nothing is cached: each call re-reads the layers and returns a fresh,
immutable model.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any

from .models import IdConfig, ResolverConfig

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILENAME = ".terseid.json"


def get_xdg_config_home() -> Path:
    """
    Get XDG config home directory.

    Returns:
        Path to config directory (defaults to ~/.config)
    """
    if xdg_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_home)
    return Path.home() / ".config"


def get_user_config_path() -> Path:
    """Get path to the user configuration file (~/.config/terseid/config.json)."""
    return get_xdg_config_home() / "terseid" / "config.json"


def get_project_config_path(project_dir: Path | None = None) -> Path:
    """
    Get path to the project configuration file.

    Args:
        project_dir: Project root (defaults to current directory)

    Returns:
        Path to .terseid.json in the project root
    """
    if project_dir is None:
        project_dir = Path.cwd()
    return project_dir / PROJECT_CONFIG_FILENAME


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """
    Deep merge two dictionaries.

    Values in `override` take precedence over values in `base`.
    Nested dicts are merged, not replaced.

    Example:
        >>> deep_merge({"ids": {"prefix": "bd"}}, {"ids": {"max_hash_length": 10}})
        {'ids': {'prefix': 'bd', 'max_hash_length': 10}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_json_file(path: Path) -> dict[str, Any] | None:
    """
    Load a JSON file, returning None if it doesn't exist or is invalid.

    Args:
        path: Path to JSON file

    Returns:
        Parsed JSON object, or None if missing, unparseable, or not an object
    """
    if not path.exists():
        return None

    try:
        with path.open() as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Failed to parse config at %s: %s", path, e)
        return None

    if not isinstance(data, dict):
        logger.warning("Ignoring config at %s: top level is not an object", path)
        return None
    return data


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid %s value '%s', ignoring", name, raw)
        return None


def _env_float(name: str) -> float | None:
    raw = os.environ.get(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid %s value '%s', ignoring", name, raw)
        return None


def apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Supported env vars:
        TERSEID_PREFIX - overrides ids.prefix and resolver.default_prefix
        TERSEID_MIN_HASH_LENGTH - overrides ids.min_hash_length
        TERSEID_MAX_HASH_LENGTH - overrides ids.max_hash_length
        TERSEID_MAX_COLLISION_PROB - overrides ids.max_collision_prob
        TERSEID_ALLOWED_PREFIXES - comma separated, overrides resolver.allowed_prefixes
        TERSEID_SUBSTRING_MATCH - overrides resolver.allow_substring_match

    Args:
        config_dict: Configuration dictionary to override

    Returns:
        New configuration dictionary with env var overrides applied
    """
    ids: dict[str, Any] = dict(config_dict.get("ids") or {})
    resolver: dict[str, Any] = dict(config_dict.get("resolver") or {})

    if prefix := os.environ.get("TERSEID_PREFIX"):
        ids["prefix"] = prefix
        resolver["default_prefix"] = prefix

    if (min_len := _env_int("TERSEID_MIN_HASH_LENGTH")) is not None:
        ids["min_hash_length"] = min_len

    if (max_len := _env_int("TERSEID_MAX_HASH_LENGTH")) is not None:
        ids["max_hash_length"] = max_len

    if (prob := _env_float("TERSEID_MAX_COLLISION_PROB")) is not None:
        ids["max_collision_prob"] = prob

    if (allowed := os.environ.get("TERSEID_ALLOWED_PREFIXES")) is not None:
        resolver["allowed_prefixes"] = [p.strip() for p in allowed.split(",") if p.strip()]

    if substring := os.environ.get("TERSEID_SUBSTRING_MATCH"):
        resolver["allow_substring_match"] = substring.lower() not in ("false", "0", "no")

    result = config_dict.copy()
    result["ids"] = ids
    result["resolver"] = resolver
    return result


def get_default_config() -> dict[str, Any]:
    """
    Get hardcoded default configuration.

    The prefix has no default; it must come from a file, the environment,
    or an explicit override.
    """
    return {
        "ids": {
            "min_hash_length": 3,
            "max_hash_length": 8,
            "max_collision_prob": 0.25,
        },
        "resolver": {
            "allowed_prefixes": [],
            "allow_substring_match": True,
        },
    }


def load_merged_config(project_dir: Path | None = None) -> dict[str, Any]:
    """
    Merge defaults, user config, project config and env vars into one dict.

    Args:
        project_dir: Project directory to load .terseid.json from (defaults to cwd)

    Returns:
        Raw merged dictionary with ``ids`` and ``resolver`` sections
    """
    merged = get_default_config()

    if user_config := load_json_file(get_user_config_path()):
        merged = deep_merge(merged, user_config)

    if project_config := load_json_file(get_project_config_path(project_dir)):
        merged = deep_merge(merged, project_config)

    return apply_env_overrides(merged)


def load_id_config(project_dir: Path | None = None, **overrides: Any) -> IdConfig:
    """
    Load generator configuration with multi-layer merging.

    Args:
        project_dir: Project directory to load .terseid.json from (defaults to cwd)
        **overrides: IdConfig fields that win over every other layer

    Returns:
        Validated IdConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
            (including a missing prefix)

    Example:
        >>> load_id_config(prefix="bd").max_hash_length
        8
    """
    merged = load_merged_config(project_dir)
    ids = {**merged["ids"], **overrides}
    return IdConfig(**ids)


def load_resolver_config(project_dir: Path | None = None, **overrides: Any) -> ResolverConfig:
    """
    Load resolver configuration with multi-layer merging.

    When the resolver section has no ``default_prefix``, the generator's
    ``ids.prefix`` is used so one file can configure both.

    Args:
        project_dir: Project directory to load .terseid.json from (defaults to cwd)
        **overrides: ResolverConfig fields that win over every other layer

    Returns:
        Validated ResolverConfig instance

    Raises:
        ValidationError: If the merged config fails Pydantic validation
    """
    merged = load_merged_config(project_dir)
    resolver = dict(merged["resolver"])
    if "default_prefix" not in resolver and "prefix" in merged["ids"]:
        resolver["default_prefix"] = merged["ids"]["prefix"]
    resolver.update(overrides)
    return ResolverConfig(**resolver)
