"""MCP server for techsvg generation tools."""

from __future__ import annotations

from typing import Any, Literal

from mcp.server.fastmcp import FastMCP
from pydantic import BaseModel, ConfigDict, Field

from ..config.settings import Settings, get_settings
from ..core.exceptions import ConfigurationError
from ..utils.logging import configure_logging, get_logger
from .tools import build_registry

logger = get_logger("techsvg.mcp")


class CharacterStyleArg(BaseModel):
    primary: str | None = None
    secondary: str | None = None
    skin: str | None = None
    hair_style: str | None = Field(default=None, alias="hairStyle")
    accessory: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class CharacterArg(BaseModel):
    name: str
    preset: str | None = None
    style: CharacterStyleArg | None = None


class DialogueArg(BaseModel):
    character: str
    text: str
    emotion: str | None = None
    type: Literal["speech", "thought", "shout"] = "speech"


class PanelArg(BaseModel):
    characters: list[str]
    dialogue: list[DialogueArg]
    caption: str | None = None


class ParticipantArg(BaseModel):
    id: str
    name: str
    type: str = "service"


class MessageArg(BaseModel):
    from_id: str = Field(alias="from")
    to: str
    text: str
    type: str = "sync"
    note: str | None = None

    model_config = ConfigDict(populate_by_name=True)


class FlowNodeArg(BaseModel):
    id: str
    type: str = "process"
    label: str
    sublabel: str | None = None


class FlowEdgeArg(BaseModel):
    from_node: str = Field(alias="from")
    to: str
    label: str | None = None
    type: str = "default"

    model_config = ConfigDict(populate_by_name=True)


def _dump(items: list[BaseModel]) -> list[dict[str, Any]]:
    return [item.model_dump(by_alias=True, exclude_none=True) for item in items]


def build_mcp_server(settings: Settings | None = None) -> FastMCP:
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)
    server = FastMCP(
        name="techsvg",
        instructions=(
            "Generate SVG illustrations for technical content: keyword-detected scenes, "
            "flowcharts, sequence diagrams and cartoon strips."
        ),
        host=settings.mcp_host,
        port=settings.mcp_port,
    )
    registry = build_registry(settings)

    def run(name: str, args: dict[str, Any]) -> dict[str, Any]:
        logger.info("MCP %s start", name, extra={"tool": name})
        result = registry.execute(name, {k: v for k, v in args.items() if v is not None})
        logger.info("MCP %s complete", name, extra={"tool": name})
        return result

    def describe(name: str) -> str:
        return registry.get(name).description

    @server.tool(name="generate_tech_illustration", description=describe("generate_tech_illustration"))
    def generate_tech_illustration(
        title: str,
        content: str | None = None,
        scene: str | None = None,
        theme: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> dict[str, Any]:
        return run(
            "generate_tech_illustration",
            {
                "title": title,
                "content": content,
                "scene": scene,
                "theme": theme,
                "width": width,
                "height": height,
            },
        )

    @server.tool(name="generate_cartoon_strip", description=describe("generate_cartoon_strip"))
    def generate_cartoon_strip(
        characters: dict[str, CharacterArg],
        panels: list[PanelArg],
        layout: str | None = None,
        title: str | None = None,
        theme: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> dict[str, Any]:
        return run(
            "generate_cartoon_strip",
            {
                "characters": {
                    cid: c.model_dump(by_alias=True, exclude_none=True)
                    for cid, c in characters.items()
                },
                "panels": _dump(panels),
                "layout": layout,
                "title": title,
                "theme": theme,
                "width": width,
                "height": height,
            },
        )

    @server.tool(name="generate_sequence_diagram", description=describe("generate_sequence_diagram"))
    def generate_sequence_diagram(
        participants: list[ParticipantArg],
        messages: list[MessageArg],
        title: str | None = None,
        theme: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> dict[str, Any]:
        return run(
            "generate_sequence_diagram",
            {
                "participants": _dump(participants),
                "messages": _dump(messages),
                "title": title,
                "theme": theme,
                "width": width,
                "height": height,
            },
        )

    @server.tool(name="generate_flowchart", description=describe("generate_flowchart"))
    def generate_flowchart(
        nodes: list[FlowNodeArg],
        edges: list[FlowEdgeArg],
        direction: Literal["TB", "LR"] | None = None,
        title: str | None = None,
        theme: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> dict[str, Any]:
        return run(
            "generate_flowchart",
            {
                "nodes": _dump(nodes),
                "edges": _dump(edges),
                "direction": direction,
                "title": title,
                "theme": theme,
                "width": width,
                "height": height,
            },
        )

    @server.tool(name="generate_from_yaml", description=describe("generate_from_yaml"))
    def generate_from_yaml(yaml: str) -> dict[str, Any]:
        return run("generate_from_yaml", {"yaml": yaml})

    @server.tool(name="generate_from_json", description=describe("generate_from_json"))
    def generate_from_json(json: str) -> dict[str, Any]:
        return run("generate_from_json", {"json": json})

    @server.tool(name="detect_scene", description=describe("detect_scene"))
    def detect_scene(title: str, content: str | None = None) -> dict[str, Any]:
        return run("detect_scene", {"title": title, "content": content})

    @server.tool(name="list_resources", description=describe("list_resources"))
    def list_resources() -> dict[str, Any]:
        return run("list_resources", {})

    return server


def _resolve_transport(raw: str) -> str:
    transport_map = {
        "stdio": "stdio",
        "sse": "sse",
        "streamable-http": "streamable-http",
        "http": "streamable-http",
        "streamable": "streamable-http",
    }
    transport = transport_map.get(raw.strip().lower())
    if not transport:
        raise ConfigurationError(
            f"Unknown MCP transport '{raw}'. Use stdio, sse, or streamable-http.",
            context={"mcp_transport": raw},
        )
    return transport


def main() -> None:
    settings = get_settings()
    transport = _resolve_transport(settings.mcp_transport)
    server = build_mcp_server(settings)
    logger.info(
        "Starting MCP server transport=%s host=%s port=%s",
        transport,
        settings.mcp_host,
        settings.mcp_port,
        extra={"transport": transport},
    )
    server.run(transport=transport)


if __name__ == "__main__":
    main()
