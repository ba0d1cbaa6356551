"""Tests for the renderer protocol."""

from __future__ import annotations

from pathlib import Path

from docassembly.formatters import IDocumentRenderer, JSONFormatter


class _BytesRenderer:
    def render(self, sections, page_info, **kwargs) -> bytes:
        return b""

    def render_to_file(self, sections, page_info, path: Path, **kwargs) -> Path:
        return path

    @property
    def content_type(self) -> str:
        return "application/pdf"


class TestRendererProtocol:
    def test_json_formatter_satisfies_protocol(self) -> None:
        assert isinstance(JSONFormatter(), IDocumentRenderer)

    def test_duck_typed_renderer_satisfies_protocol(self) -> None:
        assert isinstance(_BytesRenderer(), IDocumentRenderer)

    def test_incomplete_renderer_rejected(self) -> None:
        class _RenderOnly:
            def render(self, sections, page_info, **kwargs) -> bytes:
                return b""

        assert not isinstance(_RenderOnly(), IDocumentRenderer)
