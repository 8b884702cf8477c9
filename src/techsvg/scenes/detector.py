"""Keyword-scored scene detection.

The category table below is ordered; iteration order is the tie-break, so a
category listed earlier wins an equal score against one listed later.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Tuple

from ..utils.logging import get_logger

logger = get_logger(__name__)

TITLE_WEIGHT = 3
CONTENT_WEIGHT = 1


class SceneType(str, Enum):
    """Fixed scene categories for technical illustrations."""
    ARCHITECTURE = "architecture"
    SCALING = "scaling"
    DATABASE = "database"
    DEPLOYMENT = "deployment"
    SECURITY = "security"
    DEBUGGING = "debugging"
    TESTING = "testing"
    PERFORMANCE = "performance"
    API = "api"
    MONITORING = "monitoring"
    FRONTEND = "frontend"
    SUCCESS = "success"
    ERROR = "error"
    DEFAULT = "default"


SCENE_KEYWORDS: Tuple[Tuple[SceneType, Tuple[str, ...]], ...] = (
    (SceneType.ARCHITECTURE, (
        "architecture", "design", "pattern", "system", "infrastructure",
        "microservice", "distributed",
    )),
    (SceneType.SCALING, (
        "scale", "load", "traffic", "kubernetes", "k8s", "container", "docker",
        "cluster", "replicas", "horizontal", "auto-scaling",
    )),
    (SceneType.DATABASE, (
        "database", "sql", "postgres", "mysql", "mongo", "query", "migration",
        "schema", "orm", "redis", "cache", "replication",
    )),
    (SceneType.DEPLOYMENT, (
        "deploy", "ci", "cd", "pipeline", "release", "ship", "production",
        "staging", "github actions", "jenkins", "devops",
    )),
    (SceneType.SECURITY, (
        "security", "auth", "authentication", "jwt", "oauth", "encrypt", "ssl",
        "tls", "firewall", "vulnerability", "zero trust",
    )),
    (SceneType.DEBUGGING, (
        "debug", "bug", "error", "fix", "issue", "trace", "breakpoint", "crash",
        "exception", "troubleshoot", "root cause",
    )),
    (SceneType.TESTING, (
        "test", "jest", "vitest", "playwright", "cypress", "coverage", "unit",
        "integration", "e2e", "tdd", "mock",
    )),
    (SceneType.PERFORMANCE, (
        "performance", "optimize", "speed", "latency", "cache", "profil",
        "benchmark", "bottleneck", "memory", "cpu",
    )),
    (SceneType.API, (
        "api", "rest", "graphql", "endpoint", "gateway", "grpc", "webhook",
        "http", "request", "response",
    )),
    (SceneType.MONITORING, (
        "monitor", "observ", "metric", "log", "alert", "grafana", "datadog",
        "prometheus", "dashboard", "trace",
    )),
    (SceneType.FRONTEND, (
        "frontend", "react", "vue", "angular", "svelte", "css", "tailwind",
        "component", "ui", "web vitals", "lcp", "fid",
    )),
    (SceneType.SUCCESS, (
        "success", "complete", "done", "achieve", "launch", "milestone",
        "shipped", "celebrate", "win",
    )),
    (SceneType.ERROR, (
        "fail", "crash", "down", "outage", "incident", "500", "503", "timeout",
        "oom", "killed", "alert",
    )),
)


def score_scenes(title: str, content: str = "") -> Dict[SceneType, int]:
    """Score every category; keys follow the tie-break order."""
    text = f"{title} {content}".lower()
    title_lower = title.lower()
    scores: Dict[SceneType, int] = {}
    for scene, keywords in SCENE_KEYWORDS:
        score = 0
        for keyword in keywords:
            if keyword in text:
                score += TITLE_WEIGHT if keyword in title_lower else CONTENT_WEIGHT
        scores[scene] = score
    return scores


def detect_scene(title: str, content: str = "") -> SceneType:
    """Detect the best scene type based on title and content keywords."""
    best = SceneType.DEFAULT
    best_score = 0
    for scene, score in score_scenes(title, content).items():
        if score > best_score:
            best, best_score = scene, score
    logger.debug("Detected scene=%s score=%s title=%r", best.value, best_score, title)
    return best


def get_available_scenes() -> List[SceneType]:
    return list(SceneType)
