"""techsvg - declarative SVG illustrations for technical content."""

from importlib import import_module
from typing import TYPE_CHECKING

__all__ = [
    "Settings",
    "GenerateOptions",
    "generate_svg",
    "generate_illustration",
    "detect_scene",
    "generate_flowchart",
    "generate_sequence_diagram",
    "generate_cartoon_strip",
    "generate_from_yaml",
    "generate_from_json",
]

_EXPORTS = {
    "Settings": ".config.settings",
    "GenerateOptions": ".generator",
    "generate_svg": ".generator",
    "generate_illustration": ".generator",
    "detect_scene": ".scenes.detector",
    "generate_flowchart": ".flowchart.render",
    "generate_sequence_diagram": ".sequence.render",
    "generate_cartoon_strip": ".cartoon.render",
    "generate_from_yaml": ".description.parser",
    "generate_from_json": ".description.parser",
}

if TYPE_CHECKING:
    from .cartoon.render import generate_cartoon_strip
    from .config.settings import Settings
    from .description.parser import generate_from_json, generate_from_yaml
    from .flowchart.render import generate_flowchart
    from .generator import GenerateOptions, generate_illustration, generate_svg
    from .scenes.detector import detect_scene
    from .sequence.render import generate_sequence_diagram


def __getattr__(name: str):
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    return getattr(import_module(module, __name__), name)
