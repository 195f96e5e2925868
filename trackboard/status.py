from enum import Enum
from typing import Final


class TaskStatus(Enum):
    TODO = ("todo", "status.fail", "TODO")
    IN_PROGRESS = ("in-progress", "status.warn", "IN PROGRESS")
    REVIEW = ("review", "status.review", "REVIEW")
    DONE = ("done", "status.ok", "DONE")
    UNKNOWN = ("?", "status.unknown", "?")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "TaskStatus":
        token = normalize_status(value)
        for status in cls:
            if status.code == token:
                return status
        return cls.UNKNOWN


class CriterionStatus(Enum):
    NOT_STARTED = ("not-started", "text.dim", "Not started")
    VERIFIED = ("verified", "status.ok", "Verified")
    AUTO_VERIFIED = ("automatically-verified", "status.ok", "Auto-verified")
    PENDING_REVIEW = ("pending-review", "status.warn", "Pending review")
    FAILED = ("failed", "status.fail", "Failed")
    SKIPPED = ("skipped", "status.unknown", "Skipped")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.value[2]

    @property
    def is_verified(self) -> bool:
        return self in (CriterionStatus.VERIFIED, CriterionStatus.AUTO_VERIFIED)

    @classmethod
    def from_string(cls, value: str) -> "CriterionStatus":
        token = normalize_status(value)
        for status in cls:
            if status.code == token:
                return status
        return cls.NOT_STARTED


class DocumentStatus(Enum):
    DRAFT = ("draft", "status.warn", "Draft")
    PUBLISHED = ("published", "status.ok", "Published")
    ARCHIVED = ("archived", "status.unknown", "Archived")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def style(self) -> str:
        return self.value[1]

    @property
    def label(self) -> str:
        return self.value[2]

    @classmethod
    def from_string(cls, value: str) -> "DocumentStatus":
        token = normalize_status(value)
        for status in cls:
            if status.code == token:
                return status
        return cls.DRAFT


DOCUMENT_TYPE_LABELS: Final[dict] = {
    "adr": "ADR",
    "plan": "Plan",
    "retrospective": "Retrospective",
    "other": "Other",
}


def normalize_status(value: str) -> str:
    """Normalize a status token: lowercase, spaces and underscores become dashes."""
    return (value or "").strip().lower().replace("_", "-").replace(" ", "-")


def document_type_label(doc_type: str) -> str:
    token = normalize_status(doc_type)
    return DOCUMENT_TYPE_LABELS.get(token, (doc_type or "").strip() or DOCUMENT_TYPE_LABELS["other"])
