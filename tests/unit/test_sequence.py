from __future__ import annotations

from techsvg.sequence import SequenceDiagramConfig, generate_sequence_diagram, layout_sequence


def _config(message_count: int, **extra) -> SequenceDiagramConfig:
    return SequenceDiagramConfig.from_dict(
        {
            "participants": [
                {"id": "user", "name": "User", "type": "actor"},
                {"id": "api", "name": "API"},
                {"id": "db", "name": "DB", "type": "database"},
            ],
            "messages": [
                {"from": "user", "to": "api", "text": f"call {i}"} for i in range(message_count)
            ],
            **extra,
        }
    )


def test_lanes_are_evenly_spaced():
    config = _config(1)
    layout = layout_sequence(config.participants, config.messages, 800, 600)
    assert layout.lanes == {"user": 200, "api": 400, "db": 600}


def test_message_rows_strictly_increase():
    config = _config(5)
    layout = layout_sequence(config.participants, config.messages, 800, 600)
    ys = [row.y for row in layout.rows]
    assert ys == [160, 220, 280, 340, 400]
    assert all(a < b for a, b in zip(ys, ys[1:]))


def test_height_is_a_floor():
    short = _config(2)
    layout = layout_sequence(short.participants, short.messages, 800, 600)
    assert layout.lifeline_end_y == 320
    assert layout.height == 600

    tall = _config(10)
    layout = layout_sequence(tall.participants, tall.messages, 800, 600)
    assert layout.lifeline_end_y == 800
    assert layout.height == 840


def test_unknown_participants_degrade():
    config = SequenceDiagramConfig.from_dict(
        {
            "participants": [{"id": "a", "name": "A"}],
            "messages": [
                {"from": "ghost", "to": "a", "text": "hi"},
                {"from": "a", "to": "ghost", "text": "bye"},
            ],
        }
    )
    layout = layout_sequence(config.participants, config.messages, 800, 600)
    assert (layout.rows[0].from_x, layout.rows[0].to_x) == (0, 400)
    assert (layout.rows[1].from_x, layout.rows[1].to_x) == (400, 400)


def test_from_dict_normalizes_types():
    config = SequenceDiagramConfig.from_dict(
        {
            "participants": [{"id": "a", "name": "A", "type": "robot"}],
            "messages": [{"from": "a", "to": "a", "text": "loop", "type": "telepathy"}],
        }
    )
    assert config.participants[0].type == "service"
    assert config.messages[0].type == "sync"
    assert config.messages[0].is_self


def test_generate_sequence_diagram_grows_canvas():
    svg = generate_sequence_diagram(_config(10, title="Checkout"))
    assert 'viewBox="0 0 800 840"' in svg
    assert "Checkout" in svg
    assert svg.count('class="participant"') == 3


def test_reply_and_self_messages_render():
    svg = generate_sequence_diagram(
        {
            "participants": [{"id": "a", "name": "A"}, {"id": "b", "name": "B"}],
            "messages": [
                {"from": "a", "to": "b", "text": "req", "note": "a very long note text here"},
                {"from": "b", "to": "a", "text": "ok", "type": "reply"},
                {"from": "b", "to": "b", "text": "think", "type": "self"},
            ],
        }
    )
    assert 'id="arrow0"' in svg
    assert 'id="openArrow1"' in svg
    assert 'id="arrow2"' in svg
    assert "a very long note t" in svg
    assert "a very long note text" not in svg


def test_duplicate_ids_keep_their_own_columns():
    config = SequenceDiagramConfig.from_dict(
        {
            "participants": [
                {"id": "svc", "name": "Primary"},
                {"id": "svc", "name": "Replica"},
            ],
            "messages": [{"from": "svc", "to": "svc", "text": "sync"}],
        }
    )
    layout = layout_sequence(config.participants, config.messages, 900, 600)
    assert layout.columns == [300, 600]
    assert layout.lanes == {"svc": 300}

    svg = generate_sequence_diagram(config)
    assert svg.count('stroke-dasharray="4,4"') == 2
    assert svg.count('class="participant"') == 2
    assert "Primary" in svg
    assert "Replica" in svg
