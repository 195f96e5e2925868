from .status import CriterionStatus, DocumentStatus, TaskStatus, normalize_status
from .viewmodels import (
    CriterionItem,
    DashboardRow,
    DashboardView,
    DetailView,
    DocumentRow,
    DocumentView,
    Progress,
    TaskRow,
)

__all__ = [
    "TaskStatus",
    "CriterionStatus",
    "DocumentStatus",
    "normalize_status",
    # View models
    "DashboardRow",
    "DashboardView",
    "TaskRow",
    "CriterionItem",
    "Progress",
    "DocumentRow",
    "DetailView",
    "DocumentView",
]
