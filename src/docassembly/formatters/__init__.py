"""Renderer boundary: the renderer protocol and the JSON wire renderer.

Usage::

    from docassembly.formatters import JSONFormatter

    payload = JSONFormatter().render(plan.sections, plan.page_info)
"""

from __future__ import annotations

from docassembly.formatters.json_formatter import JSONFormatter
from docassembly.formatters.protocols import IDocumentRenderer

__all__ = [
    "IDocumentRenderer",
    "JSONFormatter",
]
