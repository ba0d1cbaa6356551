"""Convention-based adapter registry with auto-discovery.

Each domain is a Python package under ``docassembly/domains/`` with a
``__domain__.py`` manifest that exposes a ``domain`` attribute of type
``DomainConfig``.

Usage::

    from docassembly.domains.registry import get_registry

    registry = get_registry()
    invoice = registry.get("invoice")
    build = invoice.resolve("builder")
    sections = build({"items": [{"quantity": 2, "unitPrice": 10}]})

    registry.for_route("accounting", "generate-invoice").name   # "invoice"
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import Any

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainConfig:
    """Manifest for one domain adapter.

    ``builder`` and ``exemplar`` are dotted-path references, lazy-loaded on
    first access via :meth:`resolve`.
    """

    name: str
    display_name: str
    description: str = ""

    # (lens domain, action) pairs whose artifacts this adapter renders
    routes: tuple[tuple[str, str], ...] = ()

    # Dotted-path references for lazy import
    builder: str = ""
    exemplar: str = ""

    # Document naming
    default_title: str = ""
    filename_prefix: str = ""
    title_field: str = ""
    title_template: str = "{}"

    # Extra synonyms accepted as this adapter's name (e.g. "care-plan")
    aliases: tuple[str, ...] = field(default_factory=tuple)

    def resolve(self, attr: str) -> Any:
        """Lazy-import and return the object referenced by a dotted path.

        Raises:
            ValueError: If the attribute is empty or not a dotted-path field.
            ImportError: If the module/object cannot be found.
        """
        dotted = getattr(self, attr, "")
        if not dotted:
            raise ValueError(f"Domain {self.name!r} has no {attr!r} configured")
        return _import_dotted_path(dotted)


class DomainRegistry:
    """Registry of discovered domain adapters.

    Domains are registered either manually via :meth:`register` or
    automatically via :meth:`auto_discover`, which scans
    ``docassembly.domains`` sub-packages for ``__domain__.py`` manifests.
    """

    def __init__(self) -> None:
        self._domains: dict[str, DomainConfig] = {}
        self._aliases: dict[str, str] = {}
        self._routes: dict[tuple[str, str], str] = {}

    def register(self, config: DomainConfig) -> None:
        """Register a domain config and index its routes and aliases."""
        if config.name in self._domains:
            log.warning("Domain %r already registered, overwriting", config.name)
        self._domains[config.name] = config
        for alias in config.aliases:
            self._aliases[alias] = config.name
        for lens, action in config.routes:
            route = (lens, action)
            previous = self._routes.get(route)
            if previous and previous != config.name:
                log.warning(
                    "Route %s/%s moved from %r to %r", lens, action, previous, config.name
                )
            self._routes[route] = config.name
        log.debug("Registered domain: %s (%d routes)", config.name, len(config.routes))

    def get(self, name: str) -> DomainConfig:
        """Get a domain config by name or alias.

        Raises:
            KeyError: If the domain is not registered.
        """
        key = self._aliases.get(name, name)
        if key not in self._domains:
            raise KeyError(
                f"Domain {name!r} not found. "
                f"Available: {sorted(self._domains.keys())}"
            )
        return self._domains[key]

    def for_route(self, lens: str, action: str) -> DomainConfig:
        """Get the adapter registered for a ``(lens, action)`` pair.

        Raises:
            KeyError: If no adapter handles the route.
        """
        name = self._routes.get((lens, action))
        if name is None:
            raise KeyError(f"No adapter registered for {lens}/{action}")
        return self._domains[name]

    def list_domains(self) -> list[DomainConfig]:
        """Return all registered domain configs, sorted by name."""
        return sorted(self._domains.values(), key=lambda d: d.name)

    def has(self, name: str) -> bool:
        """Check if a domain is registered under *name* or an alias."""
        return self._aliases.get(name, name) in self._domains

    def has_route(self, lens: str, action: str) -> bool:
        return (lens, action) in self._routes

    def auto_discover(self) -> None:
        """Scan ``docassembly.domains`` sub-packages for ``__domain__`` manifests.

        Each sub-package is expected to have a ``__domain__.py`` module with a
        module-level ``domain`` attribute of type :class:`DomainConfig`.
        """
        import docassembly.domains as domains_pkg

        for _importer, modname, ispkg in pkgutil.iter_modules(
            domains_pkg.__path__, prefix="docassembly.domains."
        ):
            if not ispkg:
                continue

            domain_module_name = f"{modname}.__domain__"
            try:
                mod = importlib.import_module(domain_module_name)
            except ModuleNotFoundError as exc:
                if exc.name != domain_module_name:
                    raise
                log.debug("No __domain__.py in %s, skipping", modname)
                continue

            config = getattr(mod, "domain", None)
            if not isinstance(config, DomainConfig):
                log.warning(
                    "%s.__domain__.domain is not a DomainConfig, skipping",
                    modname,
                )
                continue

            self.register(config)

        log.info(
            "Auto-discovered %d domain(s): %s",
            len(self._domains),
            ", ".join(sorted(self._domains.keys())),
        )


# ── Module-level singleton ──────────────────────────────────────────

_global_registry: DomainRegistry | None = None


def get_registry() -> DomainRegistry:
    """Return the global domain registry, auto-discovering on first call."""
    global _global_registry
    if _global_registry is None:
        _global_registry = DomainRegistry()
        _global_registry.auto_discover()
    return _global_registry


# ── Internal helpers ────────────────────────────────────────────────


def _import_dotted_path(dotted: str) -> Any:
    """Import ``module.path:ClassName`` or ``module.path.attr``."""
    if ":" in dotted:
        module_path, obj_name = dotted.rsplit(":", 1)
    elif "." in dotted:
        module_path, obj_name = dotted.rsplit(".", 1)
    else:
        return importlib.import_module(dotted)

    mod = importlib.import_module(module_path)
    return getattr(mod, obj_name)
