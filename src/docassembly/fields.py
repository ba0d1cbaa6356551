"""Field resolution helpers shared by every domain adapter.

The same fact can arrive under many names (``conditions`` / ``diagnoses`` /
``problems``), so adapters never read keys directly.  They name the candidate
keys for a concept in priority order and let these helpers pick the first
present value, coerce it to a display string or a number, and fall back to a
safe default.  Nothing here raises on bad input.
"""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

PLACEHOLDER = "—"

CURRENCY_SYMBOLS: dict[str, str] = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "CAD": "CA$",
    "AUD": "AU$",
}
DEFAULT_CURRENCY_SYMBOL = "$"

_NUMERIC_NOISE = re.compile(r"[,\s%$€£¥]")
_CURRENCY_PREFIX = re.compile(r"^[A-Za-z]{1,3}(?=[\d.+-])")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


# ── Presence and lookup ─────────────────────────────────────────────


def is_present(value: Any) -> bool:
    """Return True unless *value* is None, blank text or an empty collection.

    Zero and False count as present: an explicit ``0`` is a value.
    """
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) > 0
    return True


def first_present(record: Any, *keys: str, default: Any = None) -> Any:
    """Return the first present value among *keys* in *record*."""
    if not isinstance(record, Mapping):
        return default
    for key in keys:
        value = record.get(key)
        if is_present(value):
            return value
    return default


def resolve_text(record: Any, *keys: str, default: str = PLACEHOLDER) -> str:
    """Resolve *keys* to a display string."""
    return to_display(first_present(record, *keys), default=default)


def resolve_number(record: Any, *keys: str, default: float = 0.0) -> float:
    """Resolve *keys* to a float; malformed values become *default*."""
    return to_number(first_present(record, *keys), default=default)


def resolve_list(record: Any, *keys: str) -> list[Any]:
    """Resolve *keys* to a list, dropping absent entries.

    A scalar or a mapping is wrapped in a one-item list.
    """
    value = first_present(record, *keys)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [item for item in value if is_present(item)]
    return [value]


def resolve_mapping(record: Any, *keys: str) -> Mapping[str, Any] | None:
    """Return the first present value among *keys* that is a mapping."""
    if not isinstance(record, Mapping):
        return None
    for key in keys:
        value = record.get(key)
        if isinstance(value, Mapping) and value:
            return value
    return None


# ── Coercion ────────────────────────────────────────────────────────


def to_number(value: Any, default: float = 0.0) -> float:
    """Coerce *value* to a finite float, or return *default*."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        cleaned = _CURRENCY_PREFIX.sub("", _NUMERIC_NOISE.sub("", value))
        try:
            number = float(cleaned)
        except ValueError:
            return default
    else:
        return default
    if math.isnan(number) or math.isinf(number):
        return default
    return number


def to_display(value: Any, default: str = PLACEHOLDER) -> str:
    """Render *value* as a final display string."""
    if not is_present(value):
        return default
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, (int, Decimal)):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return default
        if value.is_integer() and abs(value) < 1e15:
            return str(int(value))
        return f"{value:.10g}"
    if isinstance(value, Mapping):
        return json.dumps(value, sort_keys=True, default=str, ensure_ascii=False)
    if isinstance(value, Sequence) or isinstance(value, (set, frozenset)):
        parts = [to_display(item, default="") for item in value]
        joined = ", ".join(part for part in parts if part)
        return joined or default
    return str(value)


def format_number(value: Any) -> str:
    """Display a quantity: ``2`` rather than ``2.0``."""
    return to_display(to_number(value))


# ── Money ───────────────────────────────────────────────────────────


def currency_symbol(code: Any) -> str:
    """Map a currency code to its display symbol (``$`` when unknown)."""
    if not isinstance(code, str):
        return DEFAULT_CURRENCY_SYMBOL
    return CURRENCY_SYMBOLS.get(code.strip().upper(), DEFAULT_CURRENCY_SYMBOL)


def format_money(amount: Any, currency: Any = None) -> str:
    """Format *amount* with two decimals and the currency symbol."""
    number = round(to_number(amount), 2)
    symbol = currency_symbol(currency)
    if number < 0:
        return f"-{symbol}{abs(number):.2f}"
    return f"{symbol}{abs(number):.2f}"


def format_percent(value: Any) -> str:
    return f"{to_display(round(to_number(value), 4), default='0')}%"


# ── Labels ──────────────────────────────────────────────────────────


def humanize_key(key: str) -> str:
    """``nextAppointment`` / ``next_appointment`` -> ``Next Appointment``."""
    spaced = _CAMEL_BOUNDARY.sub(" ", str(key)).replace("_", " ").replace("-", " ")
    return " ".join(word[:1].upper() + word[1:] for word in spaced.split())


# ── Item groups ─────────────────────────────────────────────────────


@dataclass(frozen=True)
class ItemGroup:
    """A group's items after a single shape check.

    ``records`` always holds mappings; plain items were wrapped as
    ``{text_key: item}``.  ``structured`` is True when at least one source item
    was itself a record, which selects table over list presentation.
    """

    records: tuple[Mapping[str, Any], ...] = ()
    structured: bool = False
    text_key: str = "name"
    _labels: tuple[str, ...] = field(default=(), repr=False)

    @property
    def labels(self) -> list[str]:
        return list(self._labels)

    def __bool__(self) -> bool:
        return bool(self.records)

    def __len__(self) -> int:
        return len(self.records)


def normalize_group(raw: Any, text_key: str = "name") -> ItemGroup:
    """Normalize a raw group value (list, single record or string)."""
    if raw is None:
        items: list[Any] = []
    elif isinstance(raw, (list, tuple)):
        items = [item for item in raw if is_present(item)]
    else:
        items = [raw] if is_present(raw) else []

    records: list[Mapping[str, Any]] = []
    labels: list[str] = []
    structured = False
    for item in items:
        if isinstance(item, Mapping):
            structured = True
            records.append(item)
            labels.append(to_display(item))
        else:
            records.append({text_key: item})
            labels.append(to_display(item))
    return ItemGroup(
        records=tuple(records),
        structured=structured,
        text_key=text_key,
        _labels=tuple(labels),
    )


__all__ = [
    "CURRENCY_SYMBOLS",
    "ItemGroup",
    "PLACEHOLDER",
    "currency_symbol",
    "first_present",
    "format_money",
    "format_number",
    "format_percent",
    "humanize_key",
    "is_present",
    "normalize_group",
    "resolve_list",
    "resolve_mapping",
    "resolve_number",
    "resolve_text",
    "to_display",
    "to_number",
]
