"""Kubeconfig file locking compatible with kubectl's lock files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager


def lock_name(filename: str) -> str:
    """Return the lock file path for filename."""
    return filename + ".lock"


def lock_file(filename: str) -> None:
    """Create the lock file for filename, creating its directory if needed.

    Raises FileExistsError if the file is already locked.
    """
    directory = os.path.dirname(filename) or "."
    if not os.path.exists(directory):
        os.makedirs(directory, mode=0o755, exist_ok=True)
    fd = os.open(lock_name(filename), os.O_CREAT | os.O_EXCL | os.O_RDONLY, 0)
    os.close(fd)


def unlock_file(filename: str) -> None:
    """Remove the lock file for filename."""
    os.remove(lock_name(filename))


@contextmanager
def locked(filename: str) -> Iterator[None]:
    """Hold the lock on filename for the duration of the block."""
    lock_file(filename)
    try:
        yield
    finally:
        try:
            unlock_file(filename)
        except OSError:
            pass