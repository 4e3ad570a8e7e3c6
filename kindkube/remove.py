"""Removing kind cluster entries from kubeconfig files."""

from __future__ import annotations

import os
from contextlib import suppress

from .helpers import KubeconfigError, kind_cluster_key
from .lock import lock_file, unlock_file
from .paths import paths
from .read import read
from .types import Config
from .write import write


def _get_env(name: str) -> str:
    return os.environ.get(name, "")


def remove(cfg: Config, kind_cluster_name: str) -> bool:
    """Drop the kind cluster's entries from cfg in place; return whether cfg changed."""
    key = kind_cluster_key(kind_cluster_name)

    clusters = [c for c in cfg.clusters if c.name != key]
    users = [u for u in cfg.users if u.name != key]
    contexts = [c for c in cfg.contexts if c.name != key]
    mutated = (
        len(clusters) != len(cfg.clusters)
        or len(users) != len(cfg.users)
        or len(contexts) != len(cfg.contexts)
    )
    cfg.clusters, cfg.users, cfg.contexts = clusters, users, contexts

    if cfg.current_context == key:
        cfg.current_context = ""
        mutated = True
    return mutated


def _remove_from_file(kind_cluster_name: str, config_path: str) -> None:
    try:
        lock_file(config_path)
    except OSError as err:
        raise KubeconfigError(f"failed to lock config file: {err}") from err
    try:
        try:
            existing = read(config_path)
        except KubeconfigError as err:
            raise KubeconfigError(
                f"failed to read kubeconfig to remove KIND entry: {err}"
            ) from err
        if remove(existing, kind_cluster_name):
            write(existing, config_path)
    finally:
        with suppress(OSError):
            unlock_file(config_path)


def remove_kind(kind_cluster_name: str, explicit_path: str) -> None:
    """Remove the kind cluster from every kubeconfig file kubectl would consider."""
    for config_path in paths(explicit_path, _get_env):
        _remove_from_file(kind_cluster_name, config_path)