"""Merging a kind kubeconfig into an existing kubeconfig file."""

from __future__ import annotations

import os
from contextlib import suppress
from typing import Protocol, TypeVar

from .helpers import KubeconfigError, check_kubeadm_expectations
from .lock import lock_file, unlock_file
from .paths import path_for_merge
from .read import read
from .types import Config
from .write import write


class _Named(Protocol):
    name: str


_T = TypeVar("_T", bound=_Named)


def _get_env(name: str) -> str:
    return os.environ.get(name, "")


def _upsert(entries: list[_T], new: _T) -> list[_T]:
    if any(entry.name == new.name for entry in entries):
        return [new if entry.name == new.name else entry for entry in entries]
    return [*entries, new]


def merge(existing: Config, kind: Config) -> None:
    """Merge the kind config into existing in place.

    Entries with the same name are replaced, others appended; the current
    context becomes kind's.
    """
    check_kubeadm_expectations(kind)

    existing.clusters = _upsert(existing.clusters, kind.clusters[0])
    existing.users = _upsert(existing.users, kind.users[0])
    existing.contexts = _upsert(existing.contexts, kind.contexts[0])
    existing.current_context = kind.current_context

    # Some clients depend on apiVersion and kind being present.
    if not existing.other_fields:
        existing.other_fields = kind.other_fields


def write_merged(kind_config: Config, explicit_config_path: str) -> None:
    """Merge kind_config into the kubeconfig kubectl would merge into, and save it."""
    config_path = path_for_merge(explicit_config_path, _get_env)

    try:
        lock_file(config_path)
    except OSError as err:
        raise KubeconfigError(f"failed to lock config file: {err}") from err
    try:
        try:
            existing = read(config_path)
        except KubeconfigError as err:
            raise KubeconfigError(f"failed to get kubeconfig to merge: {err}") from err
        merge(existing, kind_config)
        write(existing, config_path)
    finally:
        with suppress(OSError):
            unlock_file(config_path)