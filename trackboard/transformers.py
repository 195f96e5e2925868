"""Repository records → view models."""

from __future__ import annotations

from typing import Iterable, List, Optional

from application.ports import Record
from trackboard.status import CriterionStatus, DocumentStatus, TaskStatus, document_type_label, normalize_status
from trackboard.viewmodels import (
    CriterionItem,
    DashboardRow,
    DashboardView,
    DetailView,
    DocumentRow,
    DocumentView,
    Progress,
    TaskRow,
)

CLOSED_TASK_STATUSES = ("done", "cancelled")


def _text(record: Record, key: str) -> str:
    value = record.get(key)
    return "" if value is None else str(value)


def _optional_int(value) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _is_open_task(task: Record) -> bool:
    return normalize_status(_text(task, "status")) not in CLOSED_TASK_STATUSES


def task_row(task: Record) -> TaskRow:
    return TaskRow(
        ident=_text(task, "id"),
        title=_text(task, "title"),
        status=TaskStatus.from_string(_text(task, "status")),
        description=_text(task, "description"),
    )


def criterion_item(ac: Record) -> CriterionItem:
    return CriterionItem(
        ident=_text(ac, "id"),
        description=_text(ac, "description"),
        status=CriterionStatus.from_string(_text(ac, "status")),
        testing_instructions=_text(ac, "testing_instructions"),
        notes=_text(ac, "notes"),
        task_id=_text(ac, "task_id"),
    )


def document_row(doc: Record) -> DocumentRow:
    return DocumentRow(
        ident=_text(doc, "id"),
        title=_text(doc, "title"),
        type_label=document_type_label(_text(doc, "type")),
        status=DocumentStatus.from_string(_text(doc, "status")),
    )


def progress_for(tasks: Iterable[TaskRow]) -> Progress:
    rows = list(tasks)
    done = sum(1 for row in rows if row.status is TaskStatus.DONE)
    return Progress(completed=done, total=len(rows))


def to_dashboard(roadmap: Record, iterations: List[Record], tracks: List[Record], tasks: List[Record]) -> DashboardView:
    """Active iterations, then active tracks, then the open backlog."""
    rows: List[DashboardRow] = []
    for it in iterations:
        status = normalize_status(_text(it, "status"))
        if status == "complete":
            continue
        rows.append(
            DashboardRow(
                kind="iteration",
                ident=_text(it, "number"),
                title=_text(it, "name"),
                status=status,
                detail=f"{len(it.get('task_ids') or [])} tasks",
            )
        )
    open_tasks = [task for task in tasks if _is_open_task(task)]
    per_track = {}
    for task in open_tasks:
        key = _text(task, "track_id")
        per_track[key] = per_track.get(key, 0) + 1
    for track in tracks:
        status = normalize_status(_text(track, "status"))
        if status == "complete":
            continue
        ident = _text(track, "id")
        rows.append(
            DashboardRow(
                kind="track",
                ident=ident,
                title=_text(track, "title"),
                status=status,
                detail=f"{per_track.get(ident, 0)} open",
            )
        )
    for task in open_tasks:
        rows.append(
            DashboardRow(
                kind="task",
                ident=_text(task, "id"),
                title=_text(task, "title"),
                status=TaskStatus.from_string(_text(task, "status")).label,
            )
        )
    return DashboardView(
        vision=_text(roadmap, "vision"),
        success_criteria=_text(roadmap, "success_criteria"),
        rows=rows,
    )


def to_iteration_detail(iteration: Record, tasks: List[Record], criteria: List[Record]) -> DetailView:
    task_rows = [task_row(task) for task in tasks]
    meta = []
    if iteration.get("goal"):
        meta.append(_text(iteration, "goal"))
    if iteration.get("deliverable"):
        meta.append(_text(iteration, "deliverable"))
    return DetailView(
        kind="iteration",
        ident=_text(iteration, "number"),
        title=_text(iteration, "name"),
        status=normalize_status(_text(iteration, "status")),
        meta=meta,
        progress=progress_for(task_rows),
        tasks=task_rows,
        criteria=[criterion_item(ac) for ac in criteria],
    )


def to_track_detail(track: Record, tasks: List[Record], documents: List[Record]) -> DetailView:
    task_rows = [task_row(task) for task in tasks]
    return DetailView(
        kind="track",
        ident=_text(track, "id"),
        title=_text(track, "title"),
        status=normalize_status(_text(track, "status")),
        description=_text(track, "description"),
        progress=progress_for(task_rows),
        tasks=task_rows,
        documents=[document_row(doc) for doc in documents],
    )


def to_task_detail(task: Record, criteria: List[Record]) -> DetailView:
    meta = []
    if task.get("track_id"):
        meta.append(f"track {_text(task, 'track_id')}")
    if task.get("branch"):
        meta.append(f"branch {_text(task, 'branch')}")
    return DetailView(
        kind="task",
        ident=_text(task, "id"),
        title=_text(task, "title"),
        status=TaskStatus.from_string(_text(task, "status")).label,
        meta=meta,
        description=_text(task, "description"),
        criteria=[criterion_item(ac) for ac in criteria],
    )


def to_document(doc: Record) -> DocumentView:
    track_id = _text(doc, "track_id") or None
    return DocumentView(
        ident=_text(doc, "id"),
        title=_text(doc, "title"),
        doc_type=normalize_status(_text(doc, "type")) or "other",
        type_label=document_type_label(_text(doc, "type")),
        status=DocumentStatus.from_string(_text(doc, "status")),
        content=_text(doc, "content"),
        track_id=track_id,
        iteration_number=_optional_int(doc.get("iteration_number")),
    )


__all__ = [
    "task_row",
    "criterion_item",
    "document_row",
    "progress_for",
    "to_dashboard",
    "to_iteration_detail",
    "to_track_detail",
    "to_task_detail",
    "to_document",
]
