from __future__ import annotations

import pytest

from techsvg.animations import (
    ANIMATION_PRESETS,
    AnimationConfig,
    add_animations,
    get_animation_css,
    get_animation_keyframes,
    staggered_animation,
)
from techsvg.generator import generate_svg


def test_animation_css_defaults():
    assert get_animation_css(AnimationConfig("fadeIn")) == "animation: fadeIn 0.5s ease-out 0s 1 normal;"


def test_slide_in_uses_slide_in_up():
    assert get_animation_css(AnimationConfig("slideIn")).startswith("animation: slideInUp ")


def test_zero_iterations_is_infinite():
    css = get_animation_css(ANIMATION_PRESETS["gentlePulse"])
    assert css == "animation: pulse 2s ease-in-out 0s infinite normal;"


def test_keyframes_cover_every_animation():
    keyframes = get_animation_keyframes()
    for name in ("fadeIn", "slideInUp", "pulse", "bounce", "shake", "glow", "float", "spin", "draw", "typewriter"):
        assert f"@keyframes {name} " in keyframes


def test_add_animations_injects_style_after_root_tag():
    svg = generate_svg("Hello").svg
    animated = add_animations(svg, [(".card", ANIMATION_PRESETS["fadeInSequence"])])

    assert animated.startswith("<?xml")
    root_end = animated.index(">", animated.index("<svg")) + 1
    assert animated[root_end:].lstrip().startswith("<style>")
    assert ".card { animation: fadeIn" in animated
    assert animated.count("<style>") == 1


def test_add_animations_without_entries_is_identity():
    svg = generate_svg("Hello").svg
    assert add_animations(svg, []) == svg


def test_staggered_animation():
    configs = staggered_animation(AnimationConfig("fadeIn", delay=0.2), 3, stagger=0.5)
    assert [c.delay for c in configs] == pytest.approx([0.2, 0.7, 1.2])
    assert all(c.type == "fadeIn" for c in configs)
