"""Artifact -> document plan: adapter selection, page info and file naming.

This is the seam between the caller (which holds an already-fetched artifact)
and the external renderer.  The adapter call itself is pure; only the
``generated_at`` timestamp depends on the clock, and callers may pin it.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable

from docassembly.domains.registry import DomainConfig, DomainRegistry, get_registry
from docassembly.exceptions import RecordShapeError, UnknownArtifactTypeError
from docassembly.fields import first_present, to_display
from docassembly.sections import Section, sections_to_wire

log = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"
DEFAULT_SLUG_MAX_LENGTH = 80

SectionBuilder = Callable[[Mapping[str, Any]], list[Section]]


@dataclass(frozen=True)
class Artifact:
    """A stored artifact as handed over by the caller.

    ``domain`` and ``action`` are the lens route the artifact was produced
    under (e.g. ``accounting`` / ``generate-invoice``); ``data`` is the
    free-form domain record.
    """

    id: str
    data: Mapping[str, Any] = field(default_factory=dict)
    title: str = ""
    domain: str = ""
    action: str = ""


@dataclass(frozen=True)
class PageInfo:
    """Document-level metadata passed to the renderer alongside the sections."""

    title: str
    domain: str
    generated_at: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "domain": self.domain, "generatedAt": self.generated_at}


@dataclass(frozen=True)
class DocumentPlan:
    """Everything the renderer needs for one document."""

    adapter: str
    sections: tuple[Section, ...]
    page_info: PageInfo
    filename: str
    mime_type: str = PDF_MIME_TYPE

    def to_dict(self) -> dict[str, Any]:
        return {
            "adapter": self.adapter,
            "filename": self.filename,
            "mimeType": self.mime_type,
            "pageInfo": self.page_info.to_dict(),
            "sections": sections_to_wire(self.sections),
        }


_SLUG_INVALID = re.compile(r"[^a-z0-9]+")


def slugify(value: Any, max_length: int = DEFAULT_SLUG_MAX_LENGTH) -> str:
    """Lowercase, hyphen-separated, filesystem-safe slug (``untitled`` if empty)."""
    slug = _SLUG_INVALID.sub("-", to_display(value, default="").lower()).strip("-")
    slug = slug[:max_length].rstrip("-")
    return slug or "untitled"


def build_sections(
    domain_name: str,
    record: Mapping[str, Any],
    *,
    registry: DomainRegistry | None = None,
) -> list[Section]:
    """Run the adapter registered as *domain_name* over *record*.

    Raises:
        UnknownArtifactTypeError: If no adapter has that name or alias.
        RecordShapeError: If *record* is not a mapping.
    """
    registry = registry or get_registry()
    config = _lookup(registry, domain_name)
    return _run(config, record)


def resolve_adapter(artifact: Artifact, registry: DomainRegistry | None = None) -> DomainConfig:
    """Pick the adapter for an artifact: route first, then adapter name."""
    registry = registry or get_registry()
    if artifact.action and registry.has_route(artifact.domain, artifact.action):
        return registry.for_route(artifact.domain, artifact.action)
    if artifact.domain and registry.has(artifact.domain):
        return registry.get(artifact.domain)
    raise UnknownArtifactTypeError(
        f"No adapter for artifact {artifact.id!r} "
        f"(domain={artifact.domain!r}, action={artifact.action!r})"
    )


def assemble(
    artifact: Artifact,
    *,
    registry: DomainRegistry | None = None,
    generated_at: str | None = None,
    slug_max_length: int = DEFAULT_SLUG_MAX_LENGTH,
) -> DocumentPlan:
    """Build the full document plan for *artifact*."""
    config = resolve_adapter(artifact, registry)
    sections = _run(config, artifact.data)

    title, slug_source = _title(config, artifact)
    page_info = PageInfo(
        title=title,
        domain=artifact.domain or config.name,
        generated_at=generated_at or datetime.now(timezone.utc).isoformat(),
    )
    prefix = config.filename_prefix or config.name
    filename = f"{prefix}-{slugify(slug_source, slug_max_length)}.pdf"

    log.info(
        "Assembled %s document %s: %d sections",
        config.name,
        filename,
        len(sections),
    )
    return DocumentPlan(
        adapter=config.name,
        sections=tuple(sections),
        page_info=page_info,
        filename=filename,
    )


# ── Internal helpers ────────────────────────────────────────────────


def _lookup(registry: DomainRegistry, name: str) -> DomainConfig:
    try:
        return registry.get(name)
    except KeyError as exc:
        raise UnknownArtifactTypeError(str(exc.args[0])) from exc


def _run(config: DomainConfig, record: Any) -> list[Section]:
    if not isinstance(record, Mapping):
        raise RecordShapeError(
            f"{config.name} adapter expects a mapping record, got {type(record).__name__}"
        )
    builder: SectionBuilder = config.resolve("builder")
    sections = builder(record)
    log.debug("%s adapter produced %d sections", config.name, len(sections))
    return sections


def _title(config: DomainConfig, artifact: Artifact) -> tuple[str, str]:
    """Return ``(display title, slug source)`` for the artifact."""
    if config.title_field:
        ident = to_display(first_present(artifact.data, config.title_field), default=artifact.id)
        return config.title_template.format(ident), ident
    title = artifact.title or config.default_title or config.display_name
    return title, artifact.title or artifact.id
