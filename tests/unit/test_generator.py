from __future__ import annotations

from techsvg.generator import GenerateOptions, generate_illustration, generate_svg
from techsvg.render.themes import DRACULA
from techsvg.scenes.detector import SceneType
from techsvg.scenes.renderers import SCENES


def test_generate_svg_defaults():
    result = generate_svg("Database Replication Strategies")
    assert result.scene == SceneType.DATABASE
    assert (result.width, result.height) == (700, 420)
    assert result.svg.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="0 0 700 420"' in result.svg
    assert result.svg.rstrip().endswith("</svg>")


def test_forced_scene_skips_detection():
    result = generate_svg("Database Replication", options=GenerateOptions(scene="security"))
    assert result.scene == SceneType.SECURITY


def test_unknown_forced_scene_falls_back_to_default():
    result = generate_svg("Database Replication", options=GenerateOptions(scene="nope"))
    assert result.scene == SceneType.DEFAULT


def test_theme_and_size_are_applied():
    result = generate_svg("Hello", options=GenerateOptions(width=900, height=500, theme="dracula"))
    assert 'viewBox="0 0 900 500"' in result.svg
    assert DRACULA.colors.bg in result.svg


def test_title_is_escaped():
    svg = generate_svg("Fix <script> & friends").svg
    assert "<script>" not in svg
    assert "&lt;script&gt; &amp; friends" in svg


def test_every_scene_renders_a_document():
    for scene in SCENES:
        result = generate_svg("Some Title", options=GenerateOptions(scene=scene))
        assert result.scene == scene
        assert "Some Title" in result.svg


def test_to_dict_uses_scene_value():
    payload = generate_illustration("Test Coverage Report").to_dict()
    assert payload["scene"] == "testing"
    assert payload["width"] == 700
    assert payload["svg"].startswith("<?xml")
