"""CSS animations for generated SVGs.

Animations are plain CSS: a fixed set of ``@keyframes`` plus one
``animation:`` declaration per selector, injected as a ``<style>`` block right
after the root ``<svg>`` tag.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import Dict, List, Sequence, Tuple

ANIMATION_TYPES = (
    "fadeIn",
    "slideIn",
    "pulse",
    "bounce",
    "shake",
    "glow",
    "typewriter",
    "draw",
    "float",
    "spin",
)
EASINGS = ("linear", "ease", "ease-in", "ease-out", "ease-in-out")
DIRECTIONS = ("normal", "reverse", "alternate")

_SVG_OPEN_TAG = re.compile(r"<svg([^>]*)>")

_KEYFRAMES = """
    @keyframes fadeIn {
      from { opacity: 0; }
      to { opacity: 1; }
    }

    @keyframes slideInLeft {
      from { transform: translateX(-50px); opacity: 0; }
      to { transform: translateX(0); opacity: 1; }
    }

    @keyframes slideInRight {
      from { transform: translateX(50px); opacity: 0; }
      to { transform: translateX(0); opacity: 1; }
    }

    @keyframes slideInUp {
      from { transform: translateY(30px); opacity: 0; }
      to { transform: translateY(0); opacity: 1; }
    }

    @keyframes pulse {
      0%, 100% { transform: scale(1); }
      50% { transform: scale(1.05); }
    }

    @keyframes bounce {
      0%, 100% { transform: translateY(0); }
      50% { transform: translateY(-10px); }
    }

    @keyframes shake {
      0%, 100% { transform: translateX(0); }
      25% { transform: translateX(-5px); }
      75% { transform: translateX(5px); }
    }

    @keyframes glow {
      0%, 100% { filter: drop-shadow(0 0 2px currentColor); }
      50% { filter: drop-shadow(0 0 10px currentColor); }
    }

    @keyframes float {
      0%, 100% { transform: translateY(0); }
      50% { transform: translateY(-8px); }
    }

    @keyframes spin {
      from { transform: rotate(0deg); }
      to { transform: rotate(360deg); }
    }

    @keyframes draw {
      to { stroke-dashoffset: 0; }
    }

    @keyframes typewriter {
      from { width: 0; }
      to { width: 100%; }
    }
  """


@dataclass(frozen=True)
class AnimationConfig:
    type: str
    duration: float = 0.5
    delay: float = 0
    # 0 means infinite.
    iterations: int = 1
    easing: str = "ease-out"
    direction: str = "normal"


ANIMATION_PRESETS: Dict[str, AnimationConfig] = {
    "fadeInSequence": AnimationConfig("fadeIn", duration=0.5, easing="ease-out"),
    "gentlePulse": AnimationConfig("pulse", duration=2, iterations=0, easing="ease-in-out"),
    "floatingElement": AnimationConfig("float", duration=3, iterations=0, easing="ease-in-out"),
    "attentionShake": AnimationConfig("shake", duration=0.5, iterations=3),
    "glowingHighlight": AnimationConfig("glow", duration=1.5, iterations=0),
    "spinningLoader": AnimationConfig("spin", duration=1, iterations=0, easing="linear"),
    "bounceIn": AnimationConfig("bounce", duration=0.6, easing="ease-out"),
}


def get_animation_keyframes() -> str:
    return _KEYFRAMES


def get_animation_css(config: AnimationConfig) -> str:
    """Return the ``animation:`` declaration for one config.

    ``slideIn`` uses the ``slideInUp`` keyframes.
    """
    name = "slideInUp" if config.type == "slideIn" else config.type
    iterations = "infinite" if config.iterations == 0 else config.iterations
    return (
        f"animation: {name} {config.duration}s {config.easing} "
        f"{config.delay}s {iterations} {config.direction};"
    )


def add_animations(svg: str, animations: Sequence[Tuple[str, AnimationConfig]]) -> str:
    """Inject keyframes and per-selector rules after the opening ``<svg>`` tag."""
    if not animations:
        return svg

    rules = "\n    ".join(
        f"{selector} {{ {get_animation_css(config)} }}" for selector, config in animations
    )
    style_block = f"\n  <style>\n    {get_animation_keyframes()}\n    {rules}\n  </style>"
    return _SVG_OPEN_TAG.sub(lambda m: f"<svg{m.group(1)}>{style_block}", svg, count=1)


def staggered_animation(
    base: AnimationConfig,
    count: int,
    stagger: float = 0.1,
) -> List[AnimationConfig]:
    """Copies of ``base`` whose delays grow by ``stagger`` per element."""
    return [replace(base, delay=base.delay + i * stagger) for i in range(count)]
