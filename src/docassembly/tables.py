"""Section builders shared by the domain adapters.

A :class:`Column` is one concept of a table: its header label, its candidate
source keys in priority order and its default.  Tables built from columns
cannot break the row-arity invariant because every row is produced by
resolving the same column list.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from docassembly.fields import (
    PLACEHOLDER,
    first_present,
    humanize_key,
    is_present,
    normalize_group,
    resolve_text,
    to_display,
)
from docassembly.sections import Heading, ListSection, Meta, MetaField, Section, Table, Text


@dataclass(frozen=True)
class Column:
    """One table column resolved from a record by synonym keys."""

    label: str
    keys: tuple[str, ...]
    default: str = PLACEHOLDER
    fmt: Callable[[Any], str] | None = None

    def resolve(self, record: Mapping[str, Any]) -> str:
        value = first_present(record, *self.keys)
        if value is None:
            return self.default
        if self.fmt is not None:
            return self.fmt(value)
        return to_display(value, default=self.default)


def build_table(records: Iterable[Mapping[str, Any]], columns: Sequence[Column]) -> Table:
    return Table(
        headers=[column.label for column in columns],
        rows=[[column.resolve(record) for column in columns] for record in records],
    )


def build_meta(pairs: Iterable[tuple[str, str]]) -> Meta | None:
    """Build a meta block, dropping pairs that resolved to nothing.

    Returns None when no pair survives so callers can skip the block.
    """
    fields = [
        MetaField(label=label, value=value)
        for label, value in pairs
        if value and value.strip() and value != PLACEHOLDER
    ]
    return Meta(fields=fields) if fields else None


def meta_from_mapping(mapping: Mapping[str, Any]) -> Meta | None:
    """Meta block of every present entry, labels humanized from the keys."""
    return build_meta(
        (humanize_key(key), to_display(value))
        for key, value in mapping.items()
        if is_present(value)
    )


def describe_item(item: Any, *keys: str) -> str:
    """Display a mixed list entry: strings as-is, records by *keys*."""
    if isinstance(item, Mapping):
        return resolve_text(item, *keys, default=to_display(item))
    return to_display(item)


def group_body(raw: Any, columns: Sequence[Column]) -> list[Section]:
    """Table when any item is a record, list when all are plain strings.

    Plain strings mixed into a record group fill the first column.
    """
    group = normalize_group(raw, text_key=columns[0].keys[0])
    if not group:
        return []
    if group.structured:
        return [build_table(group.records, columns)]
    return [ListSection(items=group.labels)]


def group_sections(title: str, raw: Any, columns: Sequence[Column]) -> list[Section]:
    """Heading plus :func:`group_body`; empty when the group has no items."""
    body = group_body(raw, columns)
    return [Heading(text=title), *body] if body else []


def prose_sections(title: str, value: Any, *item_keys: str) -> list[Section]:
    """Heading plus list, meta or text depending on the value's shape."""
    if not is_present(value):
        return []
    keys = item_keys or ("description", "text")
    if isinstance(value, (list, tuple)):
        items = [describe_item(item, *keys) for item in value if is_present(item)]
        return [Heading(text=title), ListSection(items=items)] if items else []
    if isinstance(value, Mapping):
        meta = meta_from_mapping(value)
        return [Heading(text=title), meta] if meta else []
    return [Heading(text=title), Text(text=to_display(value))]


__all__ = [
    "Column",
    "build_meta",
    "build_table",
    "describe_item",
    "group_body",
    "group_sections",
    "meta_from_mapping",
    "prose_sections",
]
