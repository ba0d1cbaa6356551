"""Renderer protocol: the contract every document renderer implements.

The production PDF renderer lives outside this package.  It consumes the
ordered section sequence plus page info and interprets sections by their
``type`` tag; see :mod:`docassembly.sections` for the wire shape.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from docassembly.assembly import PageInfo
    from docassembly.sections import Section


@runtime_checkable
class IDocumentRenderer(Protocol):
    """Protocol for document renderers (PDF, JSON, etc.)."""

    def render(self, sections: Sequence[Section], page_info: PageInfo, **kwargs: Any) -> bytes:
        """Render the section sequence into output bytes."""
        ...

    def render_to_file(
        self, sections: Sequence[Section], page_info: PageInfo, path: Path, **kwargs: Any
    ) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format (e.g. 'application/pdf')."""
        ...


__all__ = ["IDocumentRenderer"]
