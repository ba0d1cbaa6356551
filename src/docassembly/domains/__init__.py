"""Domain adapters: one package per artifact type, each with a ``__domain__`` manifest."""

from __future__ import annotations

from docassembly.domains.registry import DomainConfig, DomainRegistry, get_registry

__all__ = ["DomainConfig", "DomainRegistry", "get_registry"]
