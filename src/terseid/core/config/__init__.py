"""
Configuration models and loading.

This module provides Pydantic models for terseid configuration
with multi-layer merging: defaults < user < project < env vars.
"""

from .loader import (
    get_project_config_path,
    get_user_config_path,
    get_xdg_config_home,
    load_id_config,
    load_resolver_config,
)
from .models import MAX_HASH_LENGTH, IdConfig, ResolverConfig

__all__ = [
    # Models
    "IdConfig",
    "ResolverConfig",
    "MAX_HASH_LENGTH",
    # Loader functions
    "get_project_config_path",
    "get_user_config_path",
    "get_xdg_config_home",
    "load_id_config",
    "load_resolver_config",
]
