"""Render settings schema and resolver."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from .config import Fonts


def _default_heading_font_name(depth: int) -> str:
    _ = depth
    return Fonts.HEADING


def _default_heading_font_size(depth: int) -> float:
    return 20 - depth * 1.5


def _no_heading_gap(depth: int) -> float:
    _ = depth
    return 0


@dataclass(frozen=True)
class RenderSettings:
    """Fonts, sizes and spacing used by the renderer, in points."""

    block_quote_indent: float = 7
    paragraph_gap: float = 8
    list_item_gap: float = 4
    ordered_list_indent: float = 14
    ordered_list_indent_offset: float = 0
    unordered_list_indent: float = 14
    unordered_list_indent_offset: float = 0
    bullet_radius: float = 1
    code_font: str = Fonts.CODE
    normal_font: str = Fonts.NORMAL
    bold_font: str = Fonts.BOLD
    italic_font: str = Fonts.ITALIC
    bold_italic_font: str = Fonts.BOLD_ITALIC
    font_size: float = 10
    heading_font_name: Callable[[int], str] = _default_heading_font_name
    heading_font_size: Callable[[int], float] = _default_heading_font_size
    heading_gap_before: Callable[[int], float] = _no_heading_gap
    heading_gap_after: Callable[[int], float] = _no_heading_gap
    report_unsupported: bool = False
    max_nesting_depth: int | None = 200


# Depth functions cannot be expressed in a JSON settings file.
_CALLABLE_KEYS = frozenset(
    {"heading_font_name", "heading_font_size", "heading_gap_before", "heading_gap_after"}
)
_NUMBER_KEYS = frozenset(
    {
        "block_quote_indent",
        "paragraph_gap",
        "list_item_gap",
        "ordered_list_indent",
        "ordered_list_indent_offset",
        "unordered_list_indent",
        "unordered_list_indent_offset",
        "bullet_radius",
        "font_size",
    }
)
_FONT_KEYS = frozenset({"code_font", "normal_font", "bold_font", "italic_font", "bold_italic_font"})

_BUILTIN_SETTINGS_PROFILES: dict[str, RenderSettings] = {
    "default": RenderSettings(),
}


def available_settings_profiles() -> tuple[str, ...]:
    """Return built-in settings profile names."""
    return tuple(sorted(_BUILTIN_SETTINGS_PROFILES))


def resolve_settings(
    *,
    profile: str = "default",
    settings_file: str | Path | None = None,
    **overrides: Any,
) -> RenderSettings:
    """Resolve one built-in profile plus optional file and keyword overrides."""
    if profile not in _BUILTIN_SETTINGS_PROFILES:
        valid = ", ".join(available_settings_profiles())
        msg = f"unknown settings profile '{profile}'. Valid profiles: {valid}."
        raise ValueError(msg)

    resolved = _BUILTIN_SETTINGS_PROFILES[profile]
    if settings_file is not None:
        resolved = replace(resolved, **_load_settings_file(Path(settings_file)))
    if overrides:
        _reject_unknown_keys(overrides)
        resolved = replace(
            resolved, **{key: _parse_override(key, value) for key, value in overrides.items()}
        )
    return resolved


def _reject_unknown_keys(payload: dict[str, Any]) -> None:
    allowed = {field.name for field in fields(RenderSettings)}
    unknown = sorted(key for key in payload if key not in allowed)
    if unknown:
        msg = f"unknown settings key(s): {', '.join(unknown)}."
        raise ValueError(msg)


def _load_settings_file(path: Path) -> dict[str, Any]:
    if not path.exists():
        msg = f"settings file '{path}' does not exist."
        raise ValueError(msg)

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"settings file '{path}' is not valid JSON: {exc}."
        raise ValueError(msg) from exc

    if not isinstance(payload, dict):
        msg = "settings file content must be a JSON object."
        raise ValueError(msg)

    _reject_unknown_keys(payload)
    return {key: _parse_value(key, value) for key, value in payload.items()}


def _parse_override(key: str, value: Any) -> Any:
    if key in _CALLABLE_KEYS:
        if not callable(value):
            msg = f"settings key '{key}' must be a function of the heading depth."
            raise ValueError(msg)
        return value
    return _parse_value(key, value)


def _parse_value(key: str, raw_value: Any) -> Any:
    if key in _CALLABLE_KEYS:
        msg = f"settings key '{key}' is a depth function and cannot be set from a file."
        raise ValueError(msg)
    if key in _NUMBER_KEYS:
        if isinstance(raw_value, bool) or not isinstance(raw_value, (int, float)):
            msg = f"settings key '{key}' must be a number."
            raise ValueError(msg)
        if raw_value < 0:
            msg = f"settings key '{key}' must be >= 0."
            raise ValueError(msg)
        return raw_value
    if key in _FONT_KEYS:
        if not isinstance(raw_value, str) or not raw_value.strip():
            msg = f"settings key '{key}' must be a non-empty font name string."
            raise ValueError(msg)
        return raw_value
    if key == "report_unsupported":
        if not isinstance(raw_value, bool):
            msg = f"settings key '{key}' must be a boolean."
            raise ValueError(msg)
        return raw_value
    # max_nesting_depth
    if raw_value is not None and (isinstance(raw_value, bool) or not isinstance(raw_value, int)):
        msg = f"settings key '{key}' must be an integer or null."
        raise ValueError(msg)
    if raw_value is not None and raw_value < 1:
        msg = f"settings key '{key}' must be >= 1."
        raise ValueError(msg)
    return raw_value
