"""Screen data loading and AC actions, run off the UI loop."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from application.ports import NotFoundError, RepositoryError, RoadmapRepository
from trackboard import transformers
from trackboard.interface.i18n import translate
from trackboard.interface.tui_messages import ActionDoneMsg, LoadedMsg, LoadFailedMsg, Message, Route

logger = logging.getLogger("trackboard.loader")

Post = Callable[[Message], None]

ACTION_STATUSES = {
    "verify": "verified",
    "skip": "skipped",
    "fail": "failed",
}


def _iteration_number(ident: str) -> int:
    try:
        return int(str(ident).lstrip("#"))
    except ValueError:
        raise NotFoundError("iteration", ident) from None


def fetch_route(repo: RoadmapRepository, route: Route) -> Any:
    """Read everything one screen needs and shape it into its view model."""
    kind, ident = route.kind, route.ident
    if kind == "dashboard":
        return transformers.to_dashboard(
            repo.get_roadmap(), repo.list_iterations(), repo.list_tracks(), repo.list_tasks()
        )
    if kind == "iteration":
        iteration = repo.get_iteration(_iteration_number(ident))
        task_ids = [str(tid) for tid in iteration.get("task_ids") or []]
        by_id = {str(task.get("id")): task for task in repo.list_tasks()}
        tasks = [by_id[tid] for tid in task_ids if tid in by_id]
        return transformers.to_iteration_detail(iteration, tasks, repo.list_criteria(task_ids))
    if kind == "track":
        track = repo.get_track(ident)
        return transformers.to_track_detail(track, repo.list_tasks(ident), repo.list_documents(ident))
    if kind == "task":
        task = repo.get_task(ident)
        return transformers.to_task_detail(task, repo.list_criteria([ident]))
    if kind == "document":
        return transformers.to_document(repo.get_document(ident))
    raise RepositoryError(translate("ERR_UNKNOWN_ROUTE", kind=kind))


def apply_action(repo: RoadmapRepository, action: str, item_id: str, note: str = "") -> None:
    status = ACTION_STATUSES.get(action)
    if status is None:
        raise RepositoryError(f"unknown action: {action}")
    repo.update_criterion(item_id, status, note)


class BackgroundLoader:
    """
    Runs loads and actions on daemon threads.

    Every job ends by posting exactly one message carrying the caller's token:
    ``LoadedMsg``/``ActionDoneMsg`` on success, ``LoadFailedMsg`` otherwise.
    ``post`` must be safe to call from a worker thread.
    """

    def __init__(self, repository: RoadmapRepository, post: Post):
        self.repository = repository
        self.post = post

    def _spawn(self, target: Callable[..., None], *args) -> None:
        threading.Thread(target=target, args=args, daemon=True, name="trackboard-loader").start()

    def load(self, token: int, route: Route) -> None:
        self._spawn(self._load_job, token, route)

    def run_action(self, token: int, action: str, item_id: str, note: str = "") -> None:
        self._spawn(self._action_job, token, action, item_id, note)

    def _load_job(self, token: int, route: Route) -> None:
        try:
            payload = fetch_route(self.repository, route)
        except Exception as exc:
            logger.warning(
                "load %s %s failed: %s", route.kind, route.ident, exc, exc_info=not isinstance(exc, RepositoryError)
            )
            self.post(LoadFailedMsg(token, str(exc)))
            return
        logger.debug("loaded %s %s (token=%s)", route.kind, route.ident, token)
        self.post(LoadedMsg(token, payload))

    def _action_job(self, token: int, action: str, item_id: str, note: str) -> None:
        try:
            apply_action(self.repository, action, item_id, note)
        except Exception as exc:
            logger.warning(
                "%s %s failed: %s", action, item_id, exc, exc_info=not isinstance(exc, RepositoryError)
            )
            self.post(LoadFailedMsg(token, str(exc)))
            return
        logger.info("%s %s done", action, item_id)
        self.post(ActionDoneMsg(token, action, item_id))


class InlineLoader(BackgroundLoader):
    """Same contract, run on the caller's thread (tests, scripted runs)."""

    def _spawn(self, target: Callable[..., None], *args) -> None:
        target(*args)


__all__ = [
    "ACTION_STATUSES",
    "BackgroundLoader",
    "InlineLoader",
    "apply_action",
    "fetch_route",
]
