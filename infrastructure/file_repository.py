from __future__ import annotations

import copy
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from application.ports import NotFoundError, Record, RepositoryError, RoadmapRepository

logger = logging.getLogger("trackboard.repo")

SECTIONS = ("tracks", "tasks", "iterations", "acceptance_criteria", "documents")


def _rank(record: Record) -> Any:
    rank = record.get("rank")
    return (rank is None, rank if isinstance(rank, (int, float)) else 0)


class YamlRoadmapRepository(RoadmapRepository):
    """
    Roadmap data kept in a single YAML document.

    The file is re-read on every call so edits made outside the UI show up on
    the next load; writes go through a lock because loads run on worker threads.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _read(self) -> Dict[str, Any]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise RepositoryError(f"cannot read {self.path}: {exc}") from exc
        try:
            data = yaml.safe_load(raw) or {}
        except yaml.YAMLError as exc:
            raise RepositoryError(f"invalid YAML in {self.path}: {exc}") from exc
        if not isinstance(data, dict):
            raise RepositoryError(f"{self.path}: top level must be a mapping")
        for section in SECTIONS:
            value = data.get(section) or []
            if not isinstance(value, list):
                raise RepositoryError(f"{self.path}: '{section}' must be a list")
            data[section] = [item for item in value if isinstance(item, dict)]
        return data

    def _write(self, data: Dict[str, Any]) -> None:
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp.write_text(yaml.safe_dump(data, allow_unicode=True, sort_keys=False), encoding="utf-8")
            tmp.replace(self.path)
        except OSError as exc:
            raise RepositoryError(f"cannot write {self.path}: {exc}") from exc

    def _find(self, section: str, key: str, ident: Any, kind: str) -> Record:
        for record in self._read()[section]:
            if str(record.get(key)) == str(ident):
                return copy.deepcopy(record)
        raise NotFoundError(kind, str(ident))

    def get_roadmap(self) -> Record:
        roadmap = self._read().get("roadmap") or {}
        if not isinstance(roadmap, dict):
            raise RepositoryError(f"{self.path}: 'roadmap' must be a mapping")
        return dict(roadmap)

    def list_iterations(self) -> List[Record]:
        return sorted(self._read()["iterations"], key=lambda it: int(it.get("number") or 0))

    def get_iteration(self, number: int) -> Record:
        return self._find("iterations", "number", number, "iteration")

    def list_tracks(self) -> List[Record]:
        return sorted(self._read()["tracks"], key=_rank)

    def get_track(self, track_id: str) -> Record:
        return self._find("tracks", "id", track_id, "track")

    def list_tasks(self, track_id: Optional[str] = None) -> List[Record]:
        tasks = self._read()["tasks"]
        if track_id is not None:
            tasks = [task for task in tasks if str(task.get("track_id")) == str(track_id)]
        return sorted(tasks, key=_rank)

    def get_task(self, task_id: str) -> Record:
        return self._find("tasks", "id", task_id, "task")

    def list_criteria(self, task_ids: Optional[List[str]] = None) -> List[Record]:
        criteria = self._read()["acceptance_criteria"]
        if task_ids is None:
            return criteria
        # keep the task order given by the caller
        order = {str(tid): idx for idx, tid in enumerate(task_ids)}
        picked = [ac for ac in criteria if str(ac.get("task_id")) in order]
        return sorted(picked, key=lambda ac: order[str(ac.get("task_id"))])

    def get_criterion(self, ac_id: str) -> Record:
        return self._find("acceptance_criteria", "id", ac_id, "acceptance criterion")

    def list_documents(self, track_id: Optional[str] = None) -> List[Record]:
        documents = self._read()["documents"]
        if track_id is not None:
            documents = [doc for doc in documents if str(doc.get("track_id")) == str(track_id)]
        return documents

    def get_document(self, doc_id: str) -> Record:
        return self._find("documents", "id", doc_id, "document")

    def update_criterion(self, ac_id: str, status: str, notes: str = "") -> Record:
        with self._lock:
            data = self._read()
            for record in data["acceptance_criteria"]:
                if str(record.get("id")) == str(ac_id):
                    record["status"] = status
                    if notes:
                        record["notes"] = notes
                    else:
                        record.pop("notes", None)
                    self._write(data)
                    logger.info("criterion %s -> %s", ac_id, status)
                    return copy.deepcopy(record)
        raise NotFoundError("acceptance criterion", str(ac_id))
