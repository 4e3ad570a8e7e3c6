"""Reading kubeconfig files and deriving kind kubeconfigs from kubeadm ones."""

from __future__ import annotations

import yaml

from .helpers import KubeconfigError, check_kubeadm_expectations, kind_cluster_key
from .types import Config


def _parse(raw: str) -> Config:
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as err:
        raise KubeconfigError(f"failed to parse KUBECONFIG: {err}") from err
    return Config.from_dict(data)


def kind_from_raw_kubeadm(raw_kubeadm_kubeconfig: str, cluster_name: str, server: str) -> Config:
    """Return a kind kubeconfig derived from a raw kubeadm kubeconfig.

    Every named reference is renamed to the kind key for cluster_name, and the
    cluster's server is replaced by server unless server is empty.
    """
    cfg = _parse(raw_kubeadm_kubeconfig)
    check_kubeadm_expectations(cfg)

    key = kind_cluster_key(cluster_name)
    cluster, user, context = cfg.clusters[0], cfg.users[0], cfg.contexts[0]
    cluster.name = key
    user.name = key
    context.name = key
    context.context.user = key
    context.context.cluster = key
    cfg.current_context = key

    if server:
        cluster.cluster.server = server
    return cfg


def read(config_path: str) -> Config:
    """Load the kubeconfig at config_path; a missing file gives an empty Config."""
    try:
        with open(config_path, encoding="utf-8") as handle:
            raw = handle.read()
    except FileNotFoundError:
        return Config()
    except OSError as err:
        raise KubeconfigError(f"failed to read {config_path}: {err}") from err
    return _parse(raw)