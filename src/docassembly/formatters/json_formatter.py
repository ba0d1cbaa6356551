"""JSON renderer: emits the exact wire payload the PDF renderer receives."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any

from docassembly.sections import sections_to_wire

if TYPE_CHECKING:
    from docassembly.assembly import DocumentPlan, PageInfo
    from docassembly.sections import Section


class JSONFormatter:
    """Renders a section sequence and its page info as indented JSON bytes."""

    def __init__(self, indent: int | None = 2) -> None:
        self._indent = indent

    def render(self, sections: Sequence[Section], page_info: PageInfo, **kwargs: Any) -> bytes:
        """Serialize ``{"pageInfo": ..., "sections": [...]}`` to JSON bytes."""
        payload = {"pageInfo": page_info.to_dict(), "sections": sections_to_wire(sections)}
        return self._dump(payload)

    def render_to_file(
        self, sections: Sequence[Section], page_info: PageInfo, path: Path, **kwargs: Any
    ) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.render(sections, page_info, **kwargs))
        return path

    def render_plan(self, plan: DocumentPlan) -> bytes:
        """Serialize a whole document plan, filename and adapter included."""
        return self._dump(plan.to_dict())

    @property
    def content_type(self) -> str:
        return "application/json"

    def _dump(self, payload: Any) -> bytes:
        return json.dumps(payload, indent=self._indent, ensure_ascii=False).encode("utf-8")
