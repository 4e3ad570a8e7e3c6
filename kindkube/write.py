"""Writing kubeconfig files to disk."""

from __future__ import annotations

import os

from .encode import encode
from .helpers import KubeconfigError
from .types import Config


def write(cfg: Config, config_path: str) -> None:
    """Write cfg to config_path, creating parent directories if needed."""
    encoded = encode(cfg)
    directory = os.path.dirname(config_path)
    if directory and not os.path.exists(directory):
        try:
            os.makedirs(directory, mode=0o755, exist_ok=True)
        except OSError as err:
            raise KubeconfigError(f"failed to create directory for KUBECONFIG: {err}") from err
    try:
        fd = os.open(config_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with open(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(encoded)
    except OSError as err:
        raise KubeconfigError(f"failed to write KUBECONFIG: {err}") from err