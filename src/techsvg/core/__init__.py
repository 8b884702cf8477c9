"""Core types shared across techsvg."""

from .exceptions import (
    ConfigurationError,
    DescriptionError,
    DescriptionParseError,
    TechSVGError,
)

__all__ = [
    "ConfigurationError",
    "DescriptionError",
    "DescriptionParseError",
    "TechSVGError",
]
