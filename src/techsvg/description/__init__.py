"""Declarative scene and cartoon descriptions."""

from .parser import (
    CARTOON_JSON_EXAMPLE,
    CARTOON_YAML_EXAMPLE,
    SCENE_YAML_EXAMPLE,
    generate_from_description,
    generate_from_json,
    generate_from_yaml,
    parse_json,
    parse_yaml,
    validate_description,
)

__all__ = [
    "CARTOON_JSON_EXAMPLE",
    "CARTOON_YAML_EXAMPLE",
    "SCENE_YAML_EXAMPLE",
    "generate_from_description",
    "generate_from_json",
    "generate_from_yaml",
    "parse_json",
    "parse_yaml",
    "validate_description",
]
