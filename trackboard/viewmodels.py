"""View models consumed by TUI screens and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from trackboard.status import CriterionStatus, DocumentStatus, TaskStatus


@dataclass
class DashboardRow:
    """One selectable dashboard line: an iteration, a track or a backlog task."""
    kind: str  # iteration|track|task
    ident: str
    title: str
    status: str = ""
    detail: str = ""


@dataclass
class DashboardView:
    vision: str = ""
    success_criteria: str = ""
    rows: List[DashboardRow] = field(default_factory=list)


@dataclass
class TaskRow:
    ident: str
    title: str
    status: TaskStatus = TaskStatus.TODO
    description: str = ""


@dataclass
class CriterionItem:
    """Acceptance criterion row; `expanded` shows testing instructions."""
    ident: str
    description: str
    status: CriterionStatus = CriterionStatus.NOT_STARTED
    testing_instructions: str = ""
    notes: str = ""
    task_id: str = ""
    expanded: bool = False

    @property
    def expandable(self) -> bool:
        return bool(self.testing_instructions.strip())


@dataclass
class Progress:
    completed: int = 0
    total: int = 0

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        return int(self.completed * 100 / self.total)


@dataclass
class DocumentRow:
    ident: str
    title: str
    type_label: str = "Other"
    status: DocumentStatus = DocumentStatus.DRAFT


@dataclass
class DetailView:
    """Header plus sub-lists for iteration, track and task detail screens."""
    kind: str  # iteration|track|task
    ident: str
    title: str
    status: str = ""
    meta: List[str] = field(default_factory=list)
    description: str = ""
    progress: Optional[Progress] = None
    tasks: List[TaskRow] = field(default_factory=list)
    criteria: List[CriterionItem] = field(default_factory=list)
    documents: List[DocumentRow] = field(default_factory=list)


@dataclass
class DocumentView:
    ident: str
    title: str
    doc_type: str = "other"
    type_label: str = "Other"
    status: DocumentStatus = DocumentStatus.DRAFT
    content: str = ""
    track_id: Optional[str] = None
    iteration_number: Optional[int] = None


__all__ = [
    "DashboardRow",
    "DashboardView",
    "TaskRow",
    "CriterionItem",
    "Progress",
    "DocumentRow",
    "DetailView",
    "DocumentView",
]
