"""Environment variable expansion for configuration values."""
import os
import re
from typing import Any, Dict

# ${VAR:default}, ${VAR} or $VAR
_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::([^}]*))?\}|\$([A-Za-z_][A-Za-z0-9_]*)")


def _replace(match: "re.Match[str]") -> str:
    braced, default, bare = match.groups()
    name = braced or bare
    if name in os.environ:
        return os.environ[name]
    if default is not None:
        return default
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a value.

    Strings are expanded in place; dictionaries and lists are walked
    recursively. Unknown variables without a default are left untouched.

    Args:
        value: String, dict, list or any other value

    Returns:
        Value with environment variables expanded
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables in every value of a configuration dictionary."""
    return expand_env_vars(config)
