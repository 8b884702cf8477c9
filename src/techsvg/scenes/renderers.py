"""Fixed-layout scene compositions, one per scene category.

Each renderer takes ``(title, colors, width, height)`` and returns the SVG
fragments for the scene body. Coordinates are laid out for the default
700x420 canvas; only the title bar follows the actual canvas size.
"""

from __future__ import annotations

from typing import Callable, Dict

from ..render.primitives import (
    CodeLine as C,
    TerminalLine as T,
    arrow,
    card,
    code_snippet,
    metric,
    status,
    terminal_block,
    title_bar,
)
from ..render.themes import ThemeColors
from .detector import SceneType

SceneRenderer = Callable[[str, ThemeColors, float, float], str]


def architecture(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(80, 100, 120, 100, "globe", "Client", c, c.cyan),
        card(290, 100, 120, 100, "server", "Server", c, c.blue),
        card(500, 100, 120, 100, "database", "Database", c, c.purple),
        arrow(200, 150, 290, 150, c.cyan, "HTTP", False, c),
        arrow(410, 150, 500, 150, c.purple, "SQL", False, c),
        metric(80, 250, "Latency", "12", c, "ms", c.green),
        metric(210, 250, "Uptime", "99.9", c, "%", c.green),
        status(360, 280, "ok", "All systems operational", c),
        title_bar(title, w, h, c),
    ])


def scaling(title: str, c: ThemeColors, w: float, h: float) -> str:
    nodes = [
        card(80 + i * 140, 180, 100, 80, "server", f"Node {i + 1}", c, c.orange if i == 3 else c.green)
        for i in range(4)
    ]
    fanout = [arrow(350, 130, 130 + i * 140, 180, c.cyan, "", False, c) for i in range(4)]
    return "".join([
        card(290, 50, 120, 80, "cloud", "Load Balancer", c, c.cyan),
        *nodes,
        *fanout,
        metric(150, 290, "RPS", "45K", c, "", c.blue),
        metric(290, 290, "Nodes", "4", c, "", c.green),
        metric(430, 290, "CPU", "72", c, "%", c.orange),
        title_bar(title, w, h, c),
    ])


def database(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(180, 80, 140, 100, "database", "Primary", c, c.purple),
        card(380, 80, 140, 100, "database", "Replica", c, c.cyan),
        arrow(320, 130, 380, 130, c.green, "sync", False, c),
        metric(80, 220, "QPS", "2.3K", c, "", c.purple),
        metric(210, 220, "Latency", "4", c, "ms", c.green),
        metric(340, 220, "Connections", "128", c, "", c.blue),
        metric(470, 220, "Cache Hit", "94", c, "%", c.green),
        status(200, 320, "ok", "Replication healthy", c),
        status(400, 320, "ok", "Replica in sync", c),
        title_bar(title, w, h, c),
    ])


def deployment(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(60, 120, 100, 80, "code", "Code", c, c.muted),
        card(200, 120, 100, 80, "git", "Build", c, c.orange),
        card(340, 120, 100, 80, "target", "Test", c, c.blue),
        card(480, 120, 100, 80, "rocket", "Deploy", c, c.green),
        arrow(160, 160, 200, 160, c.muted, "", False, c),
        arrow(300, 160, 340, 160, c.orange, "", False, c),
        arrow(440, 160, 480, 160, c.blue, "", False, c),
        metric(140, 240, "Build", "2.3", c, "min", c.orange),
        metric(290, 240, "Tests", "141", c, "", c.green),
        metric(440, 240, "Coverage", "87", c, "%", c.blue),
        status(280, 330, "ok", "Pipeline passed • Ready for production", c),
        title_bar(title, w, h, c),
    ])


def security(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(80, 120, 120, 90, "globe", "Internet", c, c.muted),
        card(290, 120, 120, 90, "shield", "Firewall", c, c.green),
        card(500, 120, 120, 90, "lock", "Auth", c, c.purple),
        arrow(200, 165, 290, 165, c.muted, "HTTPS", False, c),
        arrow(410, 165, 500, 165, c.green, "mTLS", False, c),
        metric(100, 250, "Blocked", "847", c, "", c.red),
        metric(250, 250, "Auth Rate", "99.2", c, "%", c.green),
        metric(400, 250, "Threats", "0", c, "", c.green),
        status(280, 340, "ok", "Zero Trust • All traffic encrypted", c),
        title_bar(title, w, h, c),
    ])


def debugging(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        code_snippet(40, 50, 300, 130, [
            C("async function fetch() {"),
            C("  const res = await api.get();", hl=True),
            C("  return res.data;"),
            C("}"),
        ], c, "debug.ts"),
        terminal_block(360, 50, 300, 130, [
            T("node debug.ts"),
            T("TypeError: Cannot read undefined", err=True),
            T("    at fetch (debug.ts:2)", err=True),
        ], c),
        card(150, 220, 120, 80, "alert", "Bug Found", c, c.red),
        card(430, 220, 120, 80, "check", "Fixed", c, c.green),
        arrow(270, 260, 430, 260, c.orange, "debug", False, c),
        status(280, 340, "ok", "Issue resolved", c),
        title_bar(title, w, h, c),
    ])


def testing(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        code_snippet(40, 50, 280, 120, [
            C('describe("API", () => {'),
            C('  it("returns 200", async () => {', hl=True),
            C("    expect(res.status).toBe(200);"),
            C("  });"),
        ], c, "api.test.ts"),
        metric(360, 50, "Passed", "141", c, "", c.green),
        metric(490, 50, "Failed", "1", c, "", c.red),
        metric(360, 120, "Coverage", "87", c, "%", c.blue),
        metric(490, 120, "Duration", "4.2", c, "s", c.muted),
        card(150, 220, 120, 80, "target", "Unit", c, c.green),
        card(310, 220, 120, 80, "layers", "Integration", c, c.blue),
        card(470, 220, 120, 80, "globe", "E2E", c, c.purple),
        status(280, 340, "ok", "All test suites passed", c),
        title_bar(title, w, h, c),
    ])


def performance(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        metric(80, 60, "P99 Latency", "23", c, "ms", c.green),
        metric(210, 60, "RPS", "45K", c, "", c.blue),
        metric(340, 60, "Error Rate", "0.1", c, "%", c.green),
        metric(470, 60, "CPU", "45", c, "%", c.orange),
        terminal_block(120, 150, 460, 100, [
            T("$ perf analyze --profile"),
            T("Hotspot: db.query() - 45% CPU", err=True),
            T("✓ Optimized: -65% latency", ok=True),
        ], c),
        card(200, 280, 120, 70, "zap", "Optimized", c, c.green),
        card(380, 280, 120, 70, "activity", "Monitoring", c, c.blue),
        title_bar(title, w, h, c),
    ])


def api(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        code_snippet(40, 50, 300, 120, [
            C("GET /api/v2/users HTTP/1.1"),
            C("Authorization: Bearer ***", hl=True),
            C("Accept: application/json"),
        ], c, "request.http"),
        code_snippet(360, 50, 300, 120, [
            C("200 OK (12ms)"),
            C('{ "users": [...] }', hl=True),
            C("Content-Type: application/json"),
        ], c, "response"),
        metric(80, 200, "RPS", "8.4K", c, "", c.blue),
        metric(210, 200, "P99", "45", c, "ms", c.green),
        metric(340, 200, "Errors", "0.01", c, "%", c.green),
        metric(470, 200, "Cache", "78", c, "%", c.cyan),
        status(280, 300, "ok", "API healthy • Rate limit OK", c),
        title_bar(title, w, h, c),
    ])


def monitoring(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        metric(80, 50, "Uptime", "99.99", c, "%", c.green),
        metric(210, 50, "Alerts", "0", c, "", c.green),
        metric(340, 50, "P95", "23", c, "ms", c.blue),
        metric(470, 50, "Memory", "62", c, "%", c.orange),
        card(120, 150, 120, 80, "activity", "Metrics", c, c.blue),
        card(290, 150, 120, 80, "eye", "Traces", c, c.purple),
        card(460, 150, 120, 80, "terminal", "Logs", c, c.cyan),
        metric(80, 270, "Events", "1.2M", c, "/day", c.muted),
        metric(210, 270, "Retention", "30", c, "days", c.muted),
        status(380, 300, "ok", "All systems healthy", c),
        title_bar(title, w, h, c),
    ])


def frontend(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        metric(80, 50, "LCP", "1.2", c, "s", c.green),
        metric(210, 50, "FID", "45", c, "ms", c.green),
        metric(340, 50, "CLS", "0.02", c, "", c.green),
        metric(470, 50, "TTI", "2.1", c, "s", c.orange),
        code_snippet(150, 140, 400, 100, [
            C("const App = () => {"),
            C("  return <Suspense fallback={<Loader />}>", hl=True),
            C("    <MainContent />"),
            C("  </Suspense>;"),
        ], c, "App.tsx"),
        card(200, 280, 120, 70, "globe", "Browser", c, c.cyan),
        card(380, 280, 120, 70, "zap", "Optimized", c, c.green),
        title_bar(title, w, h, c),
    ])


def success(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(290, 60, 120, 100, "check", "Success!", c, c.green),
        metric(80, 200, "Uptime", "100", c, "%", c.green),
        metric(210, 200, "Users", "12.4K", c, "", c.blue),
        metric(340, 200, "Revenue", "+24", c, "%", c.green),
        metric(470, 200, "NPS", "72", c, "", c.purple),
        status(200, 320, "ok", "Deployment successful", c),
        status(400, 320, "ok", "Zero downtime", c),
        title_bar(title, w, h, c),
    ])


def error(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(290, 50, 120, 90, "alert", "Incident", c, c.red),
        terminal_block(150, 160, 400, 100, [
            T("$ kubectl logs pod/api-7d8f9"),
            T("ERROR: OOMKilled - Exit code 137", err=True),
            T("Memory limit exceeded: 512Mi", err=True),
        ], c),
        metric(100, 290, "Status", "503", c, "", c.red),
        metric(240, 290, "Errors", "2.3K", c, "", c.red),
        metric(380, 290, "MTTR", "4.2", c, "min", c.orange),
        status(280, 370, "error", "Service degraded • Investigating", c),
        title_bar(title, w, h, c),
    ])


def default(title: str, c: ThemeColors, w: float, h: float) -> str:
    return "".join([
        card(290, 80, 120, 100, "layers", "System", c, c.blue),
        metric(80, 220, "Requests", "8.2K", c, "/s", c.blue),
        metric(220, 220, "Latency", "12", c, "ms", c.green),
        metric(360, 220, "Errors", "0.1", c, "%", c.green),
        metric(500, 220, "Uptime", "99.9", c, "%", c.green),
        status(280, 340, "ok", "All systems operational", c),
        title_bar(title, w, h, c),
    ])


SCENES: Dict[SceneType, SceneRenderer] = {
    SceneType.ARCHITECTURE: architecture,
    SceneType.SCALING: scaling,
    SceneType.DATABASE: database,
    SceneType.DEPLOYMENT: deployment,
    SceneType.SECURITY: security,
    SceneType.DEBUGGING: debugging,
    SceneType.TESTING: testing,
    SceneType.PERFORMANCE: performance,
    SceneType.API: api,
    SceneType.MONITORING: monitoring,
    SceneType.FRONTEND: frontend,
    SceneType.SUCCESS: success,
    SceneType.ERROR: error,
    SceneType.DEFAULT: default,
}
