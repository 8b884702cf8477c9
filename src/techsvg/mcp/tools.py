"""Tool handlers exposed over MCP.

Each tool takes a plain argument mapping and returns a JSON-able dict. The
handlers only translate arguments into generator calls; validation errors
propagate to the caller.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..cartoon import BUBBLE_TYPES, generate_cartoon_strip, get_character_presets, get_emotions
from ..config.settings import Settings, get_settings
from ..description import generate_from_json, generate_from_yaml
from ..flowchart import generate_flowchart
from ..generator import DEFAULT_HEIGHT, DEFAULT_WIDTH, GenerateOptions, generate_svg
from ..render.themes import THEMES
from ..scenes.detector import detect_scene, get_available_scenes
from ..sequence import generate_sequence_diagram
from ..sequence.model import MESSAGE_TYPES, PARTICIPANT_TYPES


class Tool:
    name: str
    description: str

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def theme(self, args: Dict[str, Any]) -> str:
        return args.get("theme") or self.settings.default_theme

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class ToolRegistry:
    def __init__(self) -> None:
        self._tools: Dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def names(self) -> List[str]:
        return list(self._tools)

    def get(self, name: str) -> Tool:
        tool = self._tools.get(name)
        if tool is None:
            raise ValueError(f"Unknown tool: {name}")
        return tool

    def execute(self, name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        return self.get(name).execute(args)


class GenerateTechIllustrationTool(Tool):
    name = "generate_tech_illustration"
    description = (
        "Generate an SVG illustration for a technical topic. The scene is detected from "
        "the title and content keywords unless one is forced."
    )

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        options = GenerateOptions(
            width=args.get("width") or DEFAULT_WIDTH,
            height=args.get("height") or DEFAULT_HEIGHT,
            theme=self.theme(args),
            scene=args.get("scene"),
        )
        return generate_svg(args["title"], args.get("content") or "", options).to_dict()


class _ConfigTool(Tool):
    """Pass the whole argument mapping to a config-driven generator."""

    def render(self, config: Dict[str, Any]) -> str:
        raise NotImplementedError

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        config = dict(args)
        config["theme"] = self.theme(args)
        return {"svg": self.render(config)}


class GenerateCartoonStripTool(_ConfigTool):
    name = "generate_cartoon_strip"
    description = (
        "Generate a multi-panel cartoon strip with developer characters, emotions and "
        "speech, thought or shout bubbles."
    )

    def render(self, config: Dict[str, Any]) -> str:
        return generate_cartoon_strip(config)


class GenerateSequenceDiagramTool(_ConfigTool):
    name = "generate_sequence_diagram"
    description = "Generate a UML-style sequence diagram from participants and ordered messages."

    def render(self, config: Dict[str, Any]) -> str:
        return generate_sequence_diagram(config)


class GenerateFlowchartTool(_ConfigTool):
    name = "generate_flowchart"
    description = "Generate a flowchart with automatic level layout from nodes and edges."

    def render(self, config: Dict[str, Any]) -> str:
        return generate_flowchart(config)


class GenerateFromYamlTool(Tool):
    name = "generate_from_yaml"
    description = "Generate a scene or cartoon strip from a YAML description."

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"svg": generate_from_yaml(args["yaml"])}


class GenerateFromJsonTool(Tool):
    name = "generate_from_json"
    description = "Generate a scene or cartoon strip from a JSON description."

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {"svg": generate_from_json(args["json"])}


class DetectSceneTool(Tool):
    name = "detect_scene"
    description = "Detect which scene type a title and content would render as."

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        scene = detect_scene(args["title"], args.get("content") or "")
        return {"scene": scene.value}


class ListResourcesTool(Tool):
    name = "list_resources"
    description = (
        "List available themes, scenes, character presets, emotions, participant types, "
        "message types and bubble types."
    )

    def execute(self, args: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "themes": list(THEMES),
            "scenes": [scene.value for scene in get_available_scenes()],
            "character_presets": get_character_presets(),
            "emotions": get_emotions(),
            "participant_types": list(PARTICIPANT_TYPES),
            "message_types": list(MESSAGE_TYPES),
            "speech_types": list(BUBBLE_TYPES),
        }


def build_registry(settings: Optional[Settings] = None) -> ToolRegistry:
    registry = ToolRegistry()
    for tool_cls in (
        GenerateTechIllustrationTool,
        GenerateCartoonStripTool,
        GenerateSequenceDiagramTool,
        GenerateFlowchartTool,
        GenerateFromYamlTool,
        GenerateFromJsonTool,
        DetectSceneTool,
        ListResourcesTool,
    ):
        registry.register(tool_cls(settings))
    return registry
