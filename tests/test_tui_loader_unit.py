import logging
from pathlib import Path

import pytest

from application.ports import NotFoundError, RepositoryError
from infrastructure.file_repository import YamlRoadmapRepository
from trackboard.interface.tui_loader import InlineLoader, apply_action, fetch_route
from trackboard.interface.tui_messages import ActionDoneMsg, LoadedMsg, LoadFailedMsg, Route
from trackboard.status import CriterionStatus, DocumentStatus, TaskStatus


@pytest.fixture
def repo(roadmap_file: Path) -> YamlRoadmapRepository:
    return YamlRoadmapRepository(roadmap_file)


def test_dashboard_rows(repo):
    view = fetch_route(repo, Route("dashboard"))
    assert [(row.kind, row.ident) for row in view.rows] == [
        ("iteration", "1"),
        ("track", "TM-track-1"),
        ("task", "TM-task-2"),
        ("task", "TM-task-3"),
    ]
    assert view.rows[1].detail == "2 open"
    assert view.vision == "Ship a calm terminal dashboard"


def test_iteration_keeps_task_order(repo):
    view = fetch_route(repo, Route("iteration", "1"))
    assert [row.ident for row in view.tasks] == ["TM-task-2", "TM-task-1"]
    assert [ac.ident for ac in view.criteria] == ["TM-ac-2", "TM-ac-3", "TM-ac-1"]
    assert (view.progress.completed, view.progress.total) == (1, 2)
    assert view.meta == ["Cursor always visible"]


def test_track_has_documents(repo):
    view = fetch_route(repo, Route("track", "TM-track-1"))
    assert [row.status for row in view.tasks] == [TaskStatus.DONE, TaskStatus.IN_PROGRESS, TaskStatus.TODO]
    assert view.documents[0].type_label == "ADR"
    assert view.documents[0].status is DocumentStatus.PUBLISHED


def test_task_and_document(repo):
    task = fetch_route(repo, Route("task", "TM-task-2"))
    assert task.status == "IN PROGRESS"
    assert task.criteria[1].status is CriterionStatus.FAILED
    assert task.criteria[1].notes == "Offset jumps to zero"
    doc = fetch_route(repo, Route("document", "TM-doc-1"))
    assert doc.track_id == "TM-track-1"
    assert doc.content.count("\n") == 39


def test_bad_routes(repo):
    with pytest.raises(NotFoundError):
        fetch_route(repo, Route("iteration", "one"))
    with pytest.raises(RepositoryError, match="Unknown screen: board"):
        fetch_route(repo, Route("board"))


def test_apply_action_maps_statuses(repo):
    apply_action(repo, "skip", "TM-ac-2", "later")
    assert repo.get_criterion("TM-ac-2")["status"] == "skipped"
    with pytest.raises(RepositoryError, match="unknown action"):
        apply_action(repo, "approve", "TM-ac-2")


def test_inline_loader_posts_one_message_per_job(repo, caplog):
    posted = []
    loader = InlineLoader(repo, posted.append)
    loader.load(1, Route("task", "TM-task-1"))
    loader.run_action(2, "verify", "TM-ac-2")
    with caplog.at_level(logging.WARNING, logger="trackboard.loader"):
        loader.load(3, Route("task", "missing"))
    assert isinstance(posted[0], LoadedMsg) and posted[0].token == 1
    assert posted[1] == ActionDoneMsg(2, "verify", "TM-ac-2")
    assert posted[2] == LoadFailedMsg(3, "task not found: missing")
    assert "load task missing failed" in caplog.text
