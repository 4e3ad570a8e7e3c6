"""YAML encoding of kubeconfigs in the form kubernetes tooling writes them."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from .helpers import KubeconfigError
from .types import Config


class _Dumper(yaml.SafeDumper):
    """Block-style dumper that never emits anchors or aliases."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _represent_str(dumper: yaml.SafeDumper, data: str) -> yaml.Node:
    style = '"' if data == "" else None
    return dumper.represent_scalar("tag:yaml.org,2002:str", data, style=style)


_Dumper.add_representer(str, _represent_str)


def _normalize(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {str(key): _normalize(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    return value


def encode(cfg: Config) -> str:
    """Encode cfg as YAML with sorted keys; an empty config encodes to ''."""
    data = _normalize(cfg.to_dict())
    if not data:
        return ""
    try:
        return yaml.dump(
            data,
            Dumper=_Dumper,
            default_flow_style=False,
            sort_keys=True,
            allow_unicode=True,
            width=2**31,
        )
    except yaml.YAMLError as err:
        raise KubeconfigError(f"failed to encode KUBECONFIG: {err}") from err