"""Scene detection and fixed scene compositions."""

from .detector import SceneType, detect_scene, get_available_scenes, score_scenes
from .renderers import SCENES, SceneRenderer

__all__ = [
    "SceneType",
    "detect_scene",
    "get_available_scenes",
    "score_scenes",
    "SCENES",
    "SceneRenderer",
]
