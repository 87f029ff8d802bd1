"""
hebo-eval Configuration Module

Loads the packaged default configuration, merges an optional user YAML file
over it, interpolates ${VAR} environment references and validates the result.
"""

import os
import re
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from hebo_eval.domain.exceptions import ConfigurationError
from .schema import (
    EvalConfig,
    ProviderConfig,
    ProviderType,
    ScoringConfig,
    ExecutionConfig,
    AuthHeader,
)

# Cache for the loaded config
_config_cache: Optional[EvalConfig] = None

CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "eval_config.yaml"

API_KEY_ENV_VARS = {
    ProviderType.OPENAI: "OPENAI_API_KEY",
    ProviderType.HEBO: "HEBO_API_KEY",
    ProviderType.ANTHROPIC: "ANTHROPIC_API_KEY",
}

_ENV_REFERENCE = re.compile(r"\$\{([^}]+)\}")


def interpolate_env_vars(value: str) -> str:
    """Replace ${VAR} with its environment value; unset variables stay as written."""
    return _ENV_REFERENCE.sub(lambda m: os.environ.get(m.group(1), m.group(0)), value)


def interpolate_env_vars_in_object(obj: Any) -> Any:
    """Apply interpolate_env_vars to every string in nested dicts and lists."""
    if isinstance(obj, str):
        return interpolate_env_vars(obj)
    if isinstance(obj, dict):
        return {key: interpolate_env_vars_in_object(value) for key, value in obj.items()}
    if isinstance(obj, list):
        return [interpolate_env_vars_in_object(item) for item in obj]
    return obj


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to load configuration: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")
    return data


def load_config(path: Optional[str] = None) -> EvalConfig:
    """
    Load configuration, optionally merging a user file over the defaults.

    The result replaces the cached config returned by get_config().

    Args:
        path: Path to a user YAML file, or None for defaults only

    Raises:
        ConfigurationError: If a file is missing, malformed or invalid
    """
    global _config_cache

    raw = _read_yaml(DEFAULT_CONFIG_PATH)
    if path is not None:
        raw = _deep_merge(raw, _read_yaml(Path(path)))

    try:
        config = EvalConfig.model_validate(interpolate_env_vars_in_object(raw))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    _config_cache = config
    return config


def get_config() -> EvalConfig:
    """
    Return the loaded configuration (cached).

    Loads the packaged defaults on first use.
    """
    if _config_cache is not None:
        return _config_cache
    return load_config()


def clear_config_cache() -> None:
    """Clear the config cache (useful for testing)."""
    global _config_cache
    _config_cache = None


def get_provider_config(provider: str, config: Optional[EvalConfig] = None) -> ProviderConfig:
    """
    Look up the configuration of a provider by name.

    Raises:
        ConfigurationError: If the provider is not configured
    """
    config = config or get_config()
    provider_config = config.providers.get(provider.lower())
    if provider_config is None:
        raise ConfigurationError(f"Provider configuration not found: {provider.lower()}")
    return provider_config


def get_provider_api_key(provider: str, config: Optional[EvalConfig] = None) -> str:
    """
    Resolve a provider's API key from config, falling back to its environment variable.

    Raises:
        ConfigurationError: If no key is available
    """
    provider_config = get_provider_config(provider, config)
    api_key = provider_config.api_key
    if not api_key or _ENV_REFERENCE.search(api_key):
        api_key = os.environ.get(API_KEY_ENV_VARS[provider_config.provider])

    if not api_key:
        env_var = API_KEY_ENV_VARS[provider_config.provider]
        raise ConfigurationError(
            f"API key not found for provider '{provider}'. Set it in the config file or {env_var}"
        )
    return api_key


__all__ = [
    "EvalConfig",
    "ProviderConfig",
    "ProviderType",
    "ScoringConfig",
    "ExecutionConfig",
    "AuthHeader",
    "load_config",
    "get_config",
    "clear_config_cache",
    "get_provider_config",
    "get_provider_api_key",
    "interpolate_env_vars",
    "interpolate_env_vars_in_object",
]
