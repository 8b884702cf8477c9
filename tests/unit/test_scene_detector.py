from __future__ import annotations

import pytest

from techsvg.scenes.detector import SceneType, detect_scene, get_available_scenes, score_scenes


@pytest.mark.parametrize(
    "title,expected",
    [
        ("Database Replication Strategies", SceneType.DATABASE),
        ("Error Handling", SceneType.DEBUGGING),
        ("Zero Trust Security with JWT", SceneType.SECURITY),
        ("Hello World", SceneType.DEFAULT),
    ],
)
def test_detect_scene_from_title(title, expected):
    assert detect_scene(title) == expected


def test_tie_goes_to_earlier_category():
    # kubernetes (scaling) and deploy (deployment) both score 3
    scores = score_scenes("Kubernetes Deployment")
    assert scores[SceneType.SCALING] == scores[SceneType.DEPLOYMENT] == 3
    assert detect_scene("Kubernetes Deployment") == SceneType.SCALING


def test_title_outweighs_content():
    scores = score_scenes("Notes", "the database was slow")
    assert scores[SceneType.DATABASE] == 1
    assert score_scenes("Database notes")[SceneType.DATABASE] == 3


def test_content_alone_can_pick_scene():
    assert detect_scene("Weekly notes", "we had an outage and a timeout") == SceneType.ERROR


def test_detection_is_case_insensitive():
    assert detect_scene("POSTGRES SCHEMA") == SceneType.DATABASE


def test_available_scenes_lists_all_fourteen():
    scenes = get_available_scenes()
    assert len(scenes) == 14
    assert SceneType.DEFAULT in scenes


def test_empty_title_is_default():
    assert detect_scene("") == SceneType.DEFAULT
    assert detect_scene("", "") == SceneType.DEFAULT
    assert all(score == 0 for score in score_scenes("").values())
