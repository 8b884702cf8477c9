"""Scene illustration generator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .render.primitives import svg_document
from .render.themes import get_theme
from .scenes.detector import SceneType, detect_scene
from .scenes.renderers import SCENES
from .utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_WIDTH = 700
DEFAULT_HEIGHT = 420


@dataclass
class GenerateOptions:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    theme: Optional[str] = None
    # Forces a scene instead of keyword detection.
    scene: Optional[Union[SceneType, str]] = None


@dataclass
class GenerateResult:
    svg: str
    scene: SceneType
    width: int
    height: int

    def to_dict(self) -> dict:
        return {
            "svg": self.svg,
            "scene": self.scene.value,
            "width": self.width,
            "height": self.height,
        }


def _resolve_scene(forced: Optional[Union[SceneType, str]], title: str, content: str) -> SceneType:
    if forced:
        try:
            return SceneType(forced)
        except ValueError:
            logger.debug("Unknown forced scene %r; using default", forced)
            return SceneType.DEFAULT
    return detect_scene(title, content)


def generate_svg(
    title: str,
    content: str = "",
    options: Optional[GenerateOptions] = None,
) -> GenerateResult:
    """Generate an SVG illustration for a technical topic.

    Example:
        >>> result = generate_svg("Database Replication Strategies")
        >>> result.scene
        <SceneType.DATABASE: 'database'>
    """
    options = options or GenerateOptions()
    width = options.width or DEFAULT_WIDTH
    height = options.height or DEFAULT_HEIGHT

    colors = get_theme(options.theme).colors
    scene = _resolve_scene(options.scene, title, content)
    renderer = SCENES.get(scene, SCENES[SceneType.DEFAULT])

    svg = svg_document(width, height, colors, renderer(title, colors, width, height))
    logger.debug(
        "Generated scene=%s size=%sx%s",
        scene.value,
        width,
        height,
        extra={"scene": scene.value, "width": width, "height": height},
    )
    return GenerateResult(svg=svg, scene=scene, width=width, height=height)


def generate_illustration(
    title: str,
    content: str = "",
    options: Optional[GenerateOptions] = None,
) -> GenerateResult:
    """Alias for `generate_svg`."""
    return generate_svg(title, content, options)
