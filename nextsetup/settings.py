"""Built-in settings for the setup wizard.

Nothing is read from disk or the environment: the wizard takes no
configuration beyond the operator's answers. Callers that embed the wizard
may overlay their own values with merge_settings().
"""

from typing import Any

_DEFAULTS: dict[str, Any] = {
    "tools": {
        "npx": "npx",
        "npm": "npm",
    },
    "nextjs": {
        "package": "create-next-app@latest",
        "import_alias": "@/*",
    },
    "shadcn": {
        "package": "shadcn@latest",
    },
    "project": {
        "default_name": "my-nextjs-app",
        "dev_url": "http://localhost:3000",
    },
    "logging": {
        "level": "WARNING",
        "log_to_console": True,
        # Unset by default so no log file lands in the generated project.
        "file": None,
        "max_bytes": 1048576,  # 1 MB
        "backup_count": 1,
    },
}


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base recursively. Mutates base."""
    for key, value in overlay.items():
        if value is None:
            continue
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _deep_copy_nested(obj: Any) -> Any:
    """Return a deep copy of nested dicts/lists."""
    if isinstance(obj, dict):
        return {k: _deep_copy_nested(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_deep_copy_nested(x) for x in obj]
    return obj


def get_default_settings() -> dict[str, Any]:
    """Return a deep copy of the default settings."""
    return _deep_copy_nested(_DEFAULTS)


def merge_settings(overlay: dict[str, Any] | None = None) -> dict[str, Any]:
    """Return defaults with overlay applied. None values in overlay are ignored."""
    result = get_default_settings()
    if overlay:
        _deep_merge(result, _deep_copy_nested(overlay))
    return result


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Get a nested value by dot path (e.g. 'tools.npx')."""
    current: Any = settings
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current
