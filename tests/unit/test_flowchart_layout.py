from __future__ import annotations

from techsvg.flowchart.layout import assign_levels, find_roots, layout_flowchart
from techsvg.flowchart.model import FlowchartConfig


def _config(nodes, edges, **extra):
    return FlowchartConfig.from_dict({"nodes": nodes, "edges": edges, **extra})


def _chain():
    return _config(
        [
            {"id": "start", "type": "start", "label": "Start"},
            {"id": "step", "type": "process", "label": "Step"},
            {"id": "end", "type": "end", "label": "End"},
        ],
        [{"from": "start", "to": "step"}, {"from": "step", "to": "end"}],
    )


def test_layout_flowchart_assigns_positions():
    config = _chain()
    positions = layout_flowchart(config.nodes, config.edges)

    assert set(positions) == {"start", "step", "end"}
    assert [positions[n].y for n in ("start", "step", "end")] == [80, 210, 340]
    # single node per level is centered on the 800px canvas
    assert all(pos.x == 340 for pos in positions.values())
    assert positions["start"].width == 120
    assert positions["start"].height == 50


def test_layout_flowchart_left_to_right():
    config = _chain()
    positions = layout_flowchart(config.nodes, config.edges, direction="LR", height=600)

    assert [positions[n].x for n in ("start", "step", "end")] == [80, 240, 400]
    assert all(pos.y == (600 - 60) / 2 for pos in positions.values())


def test_siblings_are_centered_as_a_row():
    config = _config(
        [
            {"id": "root", "type": "start", "label": "Root"},
            {"id": "a", "label": "A"},
            {"id": "b", "label": "B"},
        ],
        [{"from": "root", "to": "a"}, {"from": "root", "to": "b"}],
    )
    positions = layout_flowchart(config.nodes, config.edges)

    total = 2 * 120 + 40
    assert positions["a"].x == (800 - total) / 2
    assert positions["b"].x == positions["a"].x + 160
    assert positions["a"].y == positions["b"].y


def test_first_visit_wins_in_diamond():
    config = _config(
        [{"id": n} for n in ("a", "b", "c", "d")],
        [
            {"from": "a", "to": "b"},
            {"from": "a", "to": "c"},
            {"from": "b", "to": "d"},
            {"from": "c", "to": "d"},
        ],
    )
    assert assign_levels(config.nodes, config.edges) == {"a": 0, "b": 1, "c": 1, "d": 2}


def test_multiple_roots_start_at_level_zero():
    config = _config(
        [{"id": "a"}, {"id": "b"}, {"id": "c"}],
        [{"from": "a", "to": "c"}, {"from": "b", "to": "c"}],
    )
    assert find_roots(config.nodes, config.edges) == ["a", "b"]
    assert assign_levels(config.nodes, config.edges) == {"a": 0, "b": 0, "c": 1}


def test_cycle_without_root_is_not_positioned():
    config = _config(
        [{"id": "s"}, {"id": "x"}, {"id": "y"}],
        [{"from": "x", "to": "y"}, {"from": "y", "to": "x"}],
    )
    positions = layout_flowchart(config.nodes, config.edges)
    assert set(positions) == {"s"}


def test_back_edge_does_not_move_visited_node():
    config = _config(
        [{"id": "a"}, {"id": "b"}, {"id": "c"}],
        [{"from": "a", "to": "b"}, {"from": "b", "to": "c"}, {"from": "c", "to": "b"}],
    )
    assert assign_levels(config.nodes, config.edges) == {"a": 0, "b": 1, "c": 2}


def test_edges_to_unknown_nodes_are_ignored():
    config = _config(
        [{"id": "a"}, {"id": "b"}],
        [{"from": "a", "to": "b"}, {"from": "a", "to": "ghost"}, {"from": "ghost", "to": "b"}],
    )
    positions = layout_flowchart(config.nodes, config.edges)
    assert set(positions) == {"a", "b"}
    assert "ghost" not in assign_levels(config.nodes, config.edges)


def test_empty_flowchart():
    assert layout_flowchart([], []) == {}
