"""Transactional boundary for the JSON-file repositories.

The outermost transaction takes the data-directory lock of every guarded
file, snapshots the files and writes them back if the callback raises.
The lock is held until the commit or the restore has finished, so no
other process can write a file between its snapshot and its restore. A
nested call joins the outer transaction.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from contextlib import ExitStack
from pathlib import Path
from typing import TypeVar

import structlog

from catalog.application.ports import Transactional
from catalog.infrastructure.persistence.locking import data_dir_lock

logger = structlog.get_logger()

T = TypeVar("T")

_state = threading.local()


class JsonFileTransactional(Transactional):

    def __init__(self, file_paths: Iterable[Path]) -> None:
        self._file_paths = list(file_paths)

    def transactional(self, callback: Callable[[], T]) -> T:
        depth = getattr(_state, "depth", 0)
        if depth > 0:
            _state.depth = depth + 1
            try:
                return callback()
            finally:
                _state.depth = depth

        with ExitStack() as locks:
            for directory in self._directories():
                locks.enter_context(data_dir_lock(directory))

            snapshot = self._snapshot()
            _state.depth = 1
            try:
                return callback()
            except BaseException as exc:
                self._restore(snapshot)
                logger.warning(
                    "transaction_rolled_back",
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                raise
            finally:
                _state.depth = 0

    def _directories(self) -> list[Path]:
        # Every transaction takes the directory locks in the same order.
        return sorted({path.parent.resolve() for path in self._file_paths})

    # --- Snapshot helpers -----------------------------------------------------

    def _snapshot(self) -> dict[Path, bytes | None]:
        return {
            path: path.read_bytes() if path.exists() else None
            for path in self._file_paths
        }

    @staticmethod
    def _restore(snapshot: dict[Path, bytes | None]) -> None:
        for path, content in snapshot.items():
            if content is None:
                path.unlink(missing_ok=True)
            else:
                path.write_bytes(content)
