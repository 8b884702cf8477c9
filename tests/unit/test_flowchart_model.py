from __future__ import annotations

from techsvg.flowchart import FlowchartConfig, generate_flowchart


def test_from_dict_normalizes_types_and_aliases():
    config = FlowchartConfig.from_dict(
        {
            "nodes": [
                {"id": "a", "type": "START", "label": "A"},
                {"id": "b", "type": "hexagon", "label": "B", "sublabel": "sub"},
            ],
            "edges": [
                {"source": "a", "target": "b", "type": "maybe", "label": "go"},
                {"from": "a"},
            ],
            "direction": "lr",
        }
    )

    assert [n.type for n in config.nodes] == ["start", "process"]
    assert config.nodes[1].sublabel == "sub"
    assert len(config.edges) == 1
    assert config.edges[0].from_id == "a"
    assert config.edges[0].to_id == "b"
    assert config.edges[0].type == "default"
    assert config.direction == "LR"
    assert (config.width, config.height) == (800, 600)


def test_unknown_direction_defaults_to_top_bottom():
    assert FlowchartConfig.from_dict({"direction": "diagonal"}).direction == "TB"


def test_generate_flowchart_start_end():
    svg = generate_flowchart(
        {
            "title": "Login",
            "nodes": [
                {"id": "s", "type": "start", "label": "Start"},
                {"id": "e", "type": "end", "label": "End"},
            ],
            "edges": [{"from": "s", "to": "e"}],
        }
    )

    assert svg.count("marker-end") == 1
    assert 'data-id="s"' in svg
    assert 'data-id="e"' in svg
    assert "Login" in svg


def test_generate_flowchart_skips_unplaced_nodes_and_edges():
    svg = generate_flowchart(
        {
            "nodes": [{"id": "s", "label": "S"}, {"id": "x", "label": "X"}, {"id": "y", "label": "Y"}],
            "edges": [
                {"from": "x", "to": "y"},
                {"from": "y", "to": "x"},
                {"from": "s", "to": "missing"},
            ],
        }
    )

    assert 'data-id="s"' in svg
    assert 'data-id="x"' not in svg
    assert "marker-end" not in svg


def test_generate_flowchart_truncates_labels():
    svg = generate_flowchart(
        {"nodes": [{"id": "n", "label": "A label that is far too long"}], "edges": []}
    )
    assert "A label that is" in svg
    assert "far too long" not in svg


def test_config_round_trips_through_dict():
    config = FlowchartConfig.from_dict(
        {"nodes": [{"id": "a", "label": "A"}], "edges": [{"from": "a", "to": "a"}], "title": "T"}
    )
    assert FlowchartConfig.from_dict(config.to_dict()) == config
