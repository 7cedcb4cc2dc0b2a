from typing import Any


def deep_update(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge `overlay` into `base` in place and return `base`.

    Nested dictionaries are merged key by key; any other value in `overlay`
    replaces the corresponding value in `base`. Keys are matched without
    regard to case, as configuration keys are, and keep their spelling in
    `base`."""
    base_keys = {k.lower(): k for k in base}
    for key, value in overlay.items():
        key = base_keys.get(key.lower(), key)
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_update(base[key], value)
        else:
            base[key] = value
    return base
