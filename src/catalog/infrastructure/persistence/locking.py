"""Inter-process lock shared by everything that reads or writes one data directory.

The JSON repositories and ``JsonFileTransactional`` all go through
``data_dir_lock``, so a transaction holds the directory from snapshot to
commit or restore and no other process can write in between. One
``FileLock`` instance exists per directory; it is re-entrant within a
thread and exclusive across threads and processes.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from filelock import FileLock

LOCK_FILE_NAME = ".catalog.lock"


def data_dir_lock(directory: Path) -> FileLock:
    return _lock_for(directory.resolve())


@lru_cache(maxsize=None)
def _lock_for(directory: Path) -> FileLock:
    directory.mkdir(parents=True, exist_ok=True)
    return FileLock(str(directory / LOCK_FILE_NAME))
