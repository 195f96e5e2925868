from pathlib import Path

import pytest
import yaml

SAMPLE_DATA = {
    "roadmap": {
        "id": "roadmap-1",
        "vision": "Ship a calm terminal dashboard",
        "success_criteria": "Every list scrolls without losing the cursor",
    },
    "tracks": [
        {"id": "TM-track-1", "title": "Viewport engine", "status": "in-progress", "rank": 1},
        {"id": "TM-track-2", "title": "Old work", "status": "complete", "rank": 2},
    ],
    "tasks": [
        {"id": "TM-task-1", "track_id": "TM-track-1", "title": "Linear lists", "status": "done", "rank": 1},
        {"id": "TM-task-2", "track_id": "TM-track-1", "title": "Multiline lists", "status": "in-progress", "rank": 2},
        {"id": "TM-task-3", "track_id": "TM-track-1", "title": "Document pager", "status": "todo", "rank": 3},
    ],
    "iterations": [
        {
            "number": 1,
            "name": "Scrolling",
            "goal": "Cursor always visible",
            "status": "current",
            "task_ids": ["TM-task-2", "TM-task-1"],
        },
        {"number": 0, "name": "Done already", "status": "complete", "task_ids": []},
    ],
    "acceptance_criteria": [
        {
            "id": "TM-ac-1",
            "task_id": "TM-task-1",
            "description": "Selection stays on screen",
            "status": "verified",
        },
        {
            "id": "TM-ac-2",
            "task_id": "TM-task-2",
            "description": "Expanded items scroll by line",
            "status": "not-started",
            "testing_instructions": "1. Open an iteration\n2. Expand an AC\n3. Scroll down",
        },
        {
            "id": "TM-ac-3",
            "task_id": "TM-task-2",
            "description": "Resize keeps the selection",
            "status": "failed",
            "notes": "Offset jumps to zero",
        },
    ],
    "documents": [
        {
            "id": "TM-doc-1",
            "title": "Scrolling ADR",
            "type": "adr",
            "status": "published",
            "track_id": "TM-track-1",
            "content": "\n".join(f"line {n}" for n in range(1, 41)),
        },
    ],
}


@pytest.fixture
def roadmap_file(tmp_path: Path) -> Path:
    path = tmp_path / "roadmap.yaml"
    path.write_text(yaml.safe_dump(SAMPLE_DATA, allow_unicode=True, sort_keys=False), encoding="utf-8")
    return path
