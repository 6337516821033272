"""Persistent JSON config helpers.

Stores hint keyboard rows, search limits, color tuning, and key bindings.
All access is defensive: a malformed or missing config, or any invalid
field, falls back to the default for that field.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, fields
from pathlib import Path

from platformdirs import user_config_dir

from ..hints.colors import ColorCoefficients, hex_to_hsl, hsl_to_hex
from ..hints.settings import HintSettings, KeyBindings

logger = logging.getLogger(__name__)

APP_NAME = "lazyhop"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON; returns whether it was written."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not write config %s: %s", CONFIG_PATH, exc)
        return False
    return True


def _positive_int(value: object, default: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return default
    return value


def _float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return float(value)


def _hint_rows(value: object, default: dict[str, str]) -> dict[str, str]:
    if not isinstance(value, dict):
        return dict(default)
    rows = {str(name): symbols for name, symbols in value.items() if isinstance(symbols, str)}
    return rows or dict(default)


def _row_order(value: object, default: tuple[str, ...]) -> tuple[str, ...]:
    if not isinstance(value, list):
        return default
    order = tuple(name for name in value if isinstance(name, str))
    return order or default


def _key_bindings(value: object) -> KeyBindings:
    defaults = KeyBindings()
    if not isinstance(value, dict):
        return defaults
    changes: dict[str, tuple[str, ...]] = {}
    for entry in fields(KeyBindings):
        raw = value.get(entry.name)
        if isinstance(raw, str) and raw:
            changes[entry.name] = (raw,)
        elif isinstance(raw, list):
            keys = tuple(key for key in raw if isinstance(key, str) and key)
            if keys:
                changes[entry.name] = keys
    return KeyBindings(**{**asdict(defaults), **changes})


def _coefficients(data: dict[str, object]) -> ColorCoefficients:
    defaults = ColorCoefficients()
    return ColorCoefficients(
        **{entry.name: _float(data.get(entry.name), getattr(defaults, entry.name)) for entry in fields(ColorCoefficients)}
    )


def settings_from_config(data: dict[str, object]) -> HintSettings:
    """Build ``HintSettings`` from a decoded config object, field by field."""
    defaults = HintSettings()

    anchor = None
    raw_anchor = data.get("anchor")
    if isinstance(raw_anchor, str) and raw_anchor.strip():
        try:
            anchor = hex_to_hsl(raw_anchor)
        except ValueError:
            logger.warning("ignoring invalid anchor color %r", raw_anchor)

    seed = data.get("color_seed")
    require_field = data.get("require_field")
    return HintSettings(
        hint_rows=_hint_rows(data.get("hint_rows"), defaults.hint_rows),
        hint_row_order=_row_order(data.get("hint_row_order"), defaults.hint_row_order),
        max_hints=_positive_int(data.get("max_hints"), defaults.max_hints),
        depth_limit=_positive_int(data.get("depth_limit"), defaults.depth_limit),
        require_field=require_field if isinstance(require_field, bool) else defaults.require_field,
        color_seed=seed if isinstance(seed, str) else defaults.color_seed,
        anchor=anchor,
        coefficients=_coefficients(data),
        keys=_key_bindings(data.get("keys")),
    )


def settings_to_config(settings: HintSettings) -> dict[str, object]:
    """Serialize settings into the JSON shape ``settings_from_config`` reads."""
    data: dict[str, object] = {
        "hint_rows": dict(settings.hint_rows),
        "hint_row_order": list(settings.hint_row_order),
        "max_hints": settings.max_hints,
        "depth_limit": settings.depth_limit,
        "require_field": settings.require_field,
        "color_seed": settings.color_seed,
        "keys": {name: list(keys) for name, keys in asdict(settings.keys).items()},
    }
    if settings.anchor is not None:
        data["anchor"] = hsl_to_hex(settings.anchor)
    data.update(asdict(settings.coefficients))
    return data


def load_hint_settings() -> HintSettings:
    return settings_from_config(load_config())


def save_hint_settings(settings: HintSettings) -> bool:
    """Merge ``settings`` into the config file, keeping unrelated keys."""
    config = load_config()
    config.update(settings_to_config(settings))
    return save_config(config)
