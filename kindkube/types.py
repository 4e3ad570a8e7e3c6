"""Kubeconfig data types holding the fields kind inspects or modifies.

Fields that are not inspected are kept as unstructured data in
``other_fields`` so they can be written back unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .helpers import KubeconfigError


@dataclass
class Cluster:
    """How to communicate with a kubernetes cluster."""

    server: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)


@dataclass
class NamedCluster:
    """A cluster with its nickname."""

    name: str = ""
    cluster: Cluster = field(default_factory=Cluster)


@dataclass
class NamedUser:
    """A user with its nickname; the user data is passed through untouched."""

    name: str = ""
    user: dict[str, Any] = field(default_factory=dict)


@dataclass
class Context:
    """References to a cluster and a user, plus any other context settings."""

    cluster: str = ""
    user: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)


@dataclass
class NamedContext:
    """A context with its nickname."""

    name: str = ""
    context: Context = field(default_factory=Context)


_CONFIG_KEYS = frozenset({"clusters", "users", "contexts", "current-context"})


def _mapping(value: Any, what: str) -> dict[Any, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    raise KubeconfigError(f"{what}: expected a mapping, got {type(value).__name__}")


def _sequence(value: Any, what: str) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    raise KubeconfigError(f"{what}: expected a list, got {type(value).__name__}")


def _string(value: Any, what: str) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise KubeconfigError(f"{what}: expected a string, got {type(value).__name__}")


def _rest(data: Mapping[Any, Any], known: frozenset[str]) -> dict[str, Any]:
    return {str(key): value for key, value in data.items() if key not in known}


def _cluster_from(value: Any) -> Cluster:
    data = _mapping(value, "cluster")
    return Cluster(
        server=_string(data.get("server"), "cluster.server"),
        other_fields=_rest(data, frozenset({"server"})),
    )


def _named_cluster_from(value: Any) -> NamedCluster:
    data = _mapping(value, "clusters entry")
    return NamedCluster(
        name=_string(data.get("name"), "clusters entry name"),
        cluster=_cluster_from(data.get("cluster")),
    )


def _named_user_from(value: Any) -> NamedUser:
    data = _mapping(value, "users entry")
    return NamedUser(
        name=_string(data.get("name"), "users entry name"),
        user={str(k): v for k, v in _mapping(data.get("user"), "user").items()},
    )


def _context_from(value: Any) -> Context:
    data = _mapping(value, "context")
    return Context(
        cluster=_string(data.get("cluster"), "context.cluster"),
        user=_string(data.get("user"), "context.user"),
        other_fields=_rest(data, frozenset({"cluster", "user"})),
    )


def _named_context_from(value: Any) -> NamedContext:
    data = _mapping(value, "contexts entry")
    return NamedContext(
        name=_string(data.get("name"), "contexts entry name"),
        context=_context_from(data.get("context")),
    )


def _cluster_dict(cluster: Cluster) -> dict[str, Any]:
    out = dict(cluster.other_fields)
    if cluster.server:
        out["server"] = cluster.server
    return out


def _context_dict(context: Context) -> dict[str, Any]:
    out = dict(context.other_fields)
    out["cluster"] = context.cluster
    out["user"] = context.user
    return out


@dataclass
class Config:
    """A kubeconfig with the fields kind is likely to use."""

    clusters: list[NamedCluster] = field(default_factory=list)
    users: list[NamedUser] = field(default_factory=list)
    contexts: list[NamedContext] = field(default_factory=list)
    current_context: str = ""
    other_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "Config":
        """Build a Config from a decoded YAML document (None gives an empty one)."""
        mapping = _mapping(data, "kubeconfig")
        return cls(
            clusters=[
                _named_cluster_from(item)
                for item in _sequence(mapping.get("clusters"), "clusters")
            ],
            users=[
                _named_user_from(item) for item in _sequence(mapping.get("users"), "users")
            ],
            contexts=[
                _named_context_from(item)
                for item in _sequence(mapping.get("contexts"), "contexts")
            ],
            current_context=_string(mapping.get("current-context"), "current-context"),
            other_fields=_rest(mapping, _CONFIG_KEYS),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the plain mapping form, leaving out empty optional fields."""
        out: dict[str, Any] = dict(self.other_fields)
        if self.clusters:
            out["clusters"] = [
                {"name": c.name, "cluster": _cluster_dict(c.cluster)} for c in self.clusters
            ]
        if self.users:
            out["users"] = [{"name": u.name, "user": dict(u.user)} for u in self.users]
        if self.contexts:
            out["contexts"] = [
                {"name": c.name, "context": _context_dict(c.context)} for c in self.contexts
            ]
        if self.current_context:
            out["current-context"] = self.current_context
        return out