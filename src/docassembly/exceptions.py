"""Exception hierarchy for docassembly.

Missing fields, malformed numbers, unknown enumerations and absent groups are
*not* errors: adapters degrade to a shorter document instead.  The classes
below cover contract violations only.
"""

from __future__ import annotations


class DocAssemblyError(Exception):
    """Base exception for all docassembly errors."""


class SectionContractError(DocAssemblyError, ValueError):
    """Raised when a section breaks the renderer wire contract."""


class UnknownArtifactTypeError(DocAssemblyError, KeyError):
    """Raised when no adapter is registered for an artifact's declared type."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class RecordShapeError(DocAssemblyError, TypeError):
    """Raised when the input handed to an adapter is not a record at all."""


__all__ = [
    "DocAssemblyError",
    "SectionContractError",
    "UnknownArtifactTypeError",
    "RecordShapeError",
]
