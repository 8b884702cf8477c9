"""Errors raised by techsvg.

Every error carries a human-readable ``message`` and an optional ``context``
mapping. Description errors put the offending panel and dialogue line indexes
in the context so callers can point at the exact spot in a document.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class TechSVGError(Exception):
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        if not self.context:
            return self.message
        return f"{self.message} | context={self.context}"


class ConfigurationError(TechSVGError):
    """Unknown MCP transport or other unusable settings."""


class DescriptionError(TechSVGError):
    """A YAML/JSON description is missing a field or has a field of the wrong shape."""

    @property
    def panel(self) -> Optional[int]:
        return (self.context or {}).get("panel")

    @property
    def line(self) -> Optional[int]:
        return (self.context or {}).get("line")


class DescriptionParseError(DescriptionError):
    """The source text is not well-formed YAML or JSON."""
