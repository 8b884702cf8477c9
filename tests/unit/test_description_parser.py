from __future__ import annotations

import json

import pytest

from techsvg.core.exceptions import DescriptionError, DescriptionParseError
from techsvg.description import (
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


def _cartoon(**overrides):
    desc = {
        "type": "cartoon",
        "characters": {"a": {"name": "A"}},
        "panels": [{"characters": ["a"], "dialogue": [{"character": "a", "text": "hi"}]}],
    }
    desc.update(overrides)
    return desc


class TestValidateDescription:
    """Structural validation errors name the offending field."""

    @pytest.mark.parametrize(
        "desc,message",
        [
            (None, "Invalid description: must be an object"),
            (["scene"], "Invalid description: must be an object"),
            ({"title": "x"}, 'Invalid description: missing "type" field (must be "scene" or "cartoon")'),
            ({"type": "scene"}, 'Invalid scene description: missing or invalid "title" field'),
            ({"type": "scene", "title": 42}, 'Invalid scene description: missing or invalid "title" field'),
            ({"type": "poster"}, 'Invalid description type: "poster" (must be "scene" or "cartoon")'),
            (_cartoon(characters=None), 'Invalid cartoon description: missing "characters" field'),
            (_cartoon(panels=[]), 'Invalid cartoon description: missing or empty "panels" array'),
        ],
    )
    def test_top_level_errors(self, desc, message):
        with pytest.raises(DescriptionError) as exc_info:
            validate_description(desc)
        assert exc_info.value.message == message

    def test_panel_errors_name_the_index(self):
        desc = _cartoon(panels=[_cartoon()["panels"][0], {"dialogue": []}])
        with pytest.raises(DescriptionError) as exc_info:
            validate_description(desc)
        assert exc_info.value.message == 'Invalid panel 1: missing "characters" array'
        assert exc_info.value.context == {"panel": 1}

    def test_missing_dialogue_array(self):
        with pytest.raises(DescriptionError, match='Invalid panel 0: missing "dialogue" array'):
            validate_description(_cartoon(panels=[{"characters": ["a"]}]))

    def test_dialogue_errors_name_panel_and_line(self):
        panels = [
            {
                "characters": ["a"],
                "dialogue": [{"character": "a", "text": "ok"}, {"character": "a"}],
            }
        ]
        with pytest.raises(DescriptionError) as exc_info:
            validate_description(_cartoon(panels=panels))
        assert exc_info.value.message == 'Invalid dialogue in panel 0, line 1: missing "text" field'
        assert exc_info.value.context == {"panel": 0, "line": 1}

    def test_dialogue_character_must_be_string(self):
        panels = [{"characters": ["a"], "dialogue": [{"character": 7, "text": "x"}]}]
        with pytest.raises(DescriptionError, match='line 0: missing "character" field'):
            validate_description(_cartoon(panels=panels))

    def test_valid_descriptions_pass(self):
        validate_description({"type": "scene", "title": "Hello"})
        validate_description(_cartoon())


def test_parse_yaml_syntax_error():
    with pytest.raises(DescriptionParseError):
        parse_yaml("type: [unclosed")


def test_parse_json_syntax_error():
    with pytest.raises(DescriptionParseError) as exc_info:
        parse_json("{bad json")
    assert exc_info.value.context["line"] == 1


def test_parse_errors_are_description_errors():
    with pytest.raises(DescriptionError):
        parse_json("[")


def test_empty_yaml_is_not_an_object():
    with pytest.raises(DescriptionError, match="must be an object"):
        parse_yaml("")


def test_scene_yaml_example():
    desc = parse_yaml(SCENE_YAML_EXAMPLE)
    assert desc["scene"] == "database"
    svg = generate_from_yaml(SCENE_YAML_EXAMPLE)
    assert "Database Migration Strategy" in svg
    assert 'viewBox="0 0 700 420"' in svg


def test_cartoon_yaml_example():
    svg = generate_from_yaml(CARTOON_YAML_EXAMPLE)
    assert "The Code Review" in svg
    assert svg.count('class="panel"') == 2
    assert svg.count('class="character"') == 4
    assert "Monday morning..." in svg


def test_cartoon_json_example():
    svg = generate_from_json(CARTOON_JSON_EXAMPLE)
    assert "Debugging Session" in svg
    assert 'viewBox="0 0 800 400"' in svg
    assert "Rubber Duck" in svg


STRIP_YAML = """\
type: cartoon
title: Standup
width: 600
height: 300
characters:
  ana:
    name: Ana
    preset: dev3
panels:
  - characters: [ana]
    caption: "9:30"
    dialogue:
      - character: ana
        text: "Ship it"
        emotion: happy
"""

STRIP_JSON = json.dumps(
    {
        "type": "cartoon",
        "title": "Standup",
        "width": 600,
        "height": 300,
        "characters": {"ana": {"name": "Ana", "preset": "dev3"}},
        "panels": [
            {
                "characters": ["ana"],
                "caption": "9:30",
                "dialogue": [{"character": "ana", "text": "Ship it", "emotion": "happy"}],
            }
        ],
    }
)


def test_yaml_and_json_describe_the_same_strip():
    assert parse_yaml(STRIP_YAML) == parse_json(STRIP_JSON)
    svg = generate_from_yaml(STRIP_YAML)
    assert svg == generate_from_json(STRIP_JSON)
    assert "Ship it" in svg
    assert 'viewBox="0 0 600 300"' in svg


def test_generate_from_description_matches_json_source():
    desc = json.loads(CARTOON_JSON_EXAMPLE)
    assert generate_from_description(desc) == generate_from_json(CARTOON_JSON_EXAMPLE)


def test_generate_from_description_validates():
    with pytest.raises(DescriptionError):
        generate_from_description({"type": "cartoon"})


def test_empty_characters_mapping_is_accepted():
    desc = _cartoon(characters={})
    validate_description(desc)
    svg = generate_from_description(desc)
    assert svg.count('class="panel"') == 1
    assert 'class="character"' not in svg


@pytest.mark.parametrize(
    "field,value",
    [
        ("width", "wide"),
        ("height", 0),
        ("width", True),
        ("height", 12.5),
        ("width", -300),
    ],
)
def test_dimensions_must_be_positive_integers(field, value):
    for desc in ({"type": "scene", "title": "Hello", field: value}, _cartoon(**{field: value})):
        with pytest.raises(DescriptionError) as exc_info:
            validate_description(desc)
        assert exc_info.value.message == f'Invalid description: "{field}" must be a positive integer'
        assert exc_info.value.context == {field: value}


def test_bad_width_in_yaml_is_a_description_error():
    with pytest.raises(DescriptionError, match='"width" must be a positive integer'):
        generate_from_yaml("type: scene\ntitle: Hello\nwidth: wide\n")


def test_description_error_exposes_panel_and_line():
    panels = [_cartoon()["panels"][0], {"characters": ["a"], "dialogue": [{"text": "no speaker"}]}]
    with pytest.raises(DescriptionError) as exc_info:
        validate_description(_cartoon(panels=panels))
    assert (exc_info.value.panel, exc_info.value.line) == (1, 0)
    assert "context={'panel': 1, 'line': 0}" in str(exc_info.value)

    with pytest.raises(DescriptionError) as exc_info:
        validate_description({"title": "x"})
    assert exc_info.value.panel is None
    assert exc_info.value.line is None
