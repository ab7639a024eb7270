"""Utility helpers shared by the sidebar configuration loader."""

from __future__ import annotations

import enum
import typing as typ

from .models import SidebarConfigError

EnumT = typ.TypeVar("EnumT", bound=enum.StrEnum)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _parse_choice(value: object | None, choices: type[EnumT], *, field: str) -> EnumT:
    """Return the ``choices`` member named by ``value``.

    Raises
    ------
    SidebarConfigError
        If ``value`` is missing or not one of the enum values.
    """
    text = _optional_str(value)
    try:
        return choices((text or "").lower())
    except ValueError:
        allowed = ", ".join(member.value for member in choices)
        msg = f"Invalid {field} {value!r}; expected one of: {allowed}."
        raise SidebarConfigError(msg) from None


def _parse_languages(
    value: object | None, choices: type[EnumT]
) -> tuple[EnumT, ...]:
    """Return unique languages from a list or whitespace-separated string."""
    match value:
        case str() as text:
            raw_items: list[object] = list(text.split())
        case list() | tuple():
            raw_items = list(value)
        case _:
            msg = "'languages' must be a list of language codes."
            raise SidebarConfigError(msg)
    languages: list[EnumT] = []
    for item in raw_items:
        lang = _parse_choice(item, choices, field="language")
        if lang not in languages:
            languages.append(lang)
    if not languages:
        msg = "At least one language must be configured."
        raise SidebarConfigError(msg)
    return tuple(languages)


__all__ = ["_optional_str", "_parse_choice", "_parse_languages"]
