from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

Record = Dict[str, Any]


class RepositoryError(RuntimeError):
    """Data source could not be read or written."""


class NotFoundError(RepositoryError):
    def __init__(self, kind: str, ident: str):
        super().__init__(f"{kind} not found: {ident}")
        self.kind = kind
        self.ident = ident


class RoadmapRepository(Protocol):
    def get_roadmap(self) -> Record:
        ...

    def list_iterations(self) -> List[Record]:
        ...

    def get_iteration(self, number: int) -> Record:
        ...

    def list_tracks(self) -> List[Record]:
        ...

    def get_track(self, track_id: str) -> Record:
        ...

    def list_tasks(self, track_id: Optional[str] = None) -> List[Record]:
        ...

    def get_task(self, task_id: str) -> Record:
        ...

    def list_criteria(self, task_ids: Optional[List[str]] = None) -> List[Record]:
        ...

    def get_criterion(self, ac_id: str) -> Record:
        ...

    def list_documents(self, track_id: Optional[str] = None) -> List[Record]:
        ...

    def get_document(self, doc_id: str) -> Record:
        ...

    def update_criterion(self, ac_id: str, status: str, notes: str = "") -> Record:
        ...
