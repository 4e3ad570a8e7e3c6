"""Selection of kubeconfig file paths following kubectl's rules."""

from __future__ import annotations

import os
import posixpath
import stat
import sys
from collections.abc import Callable, Iterable

KUBECONFIG_ENV = "KUBECONFIG"

GetEnv = Callable[[str], str]


def _env(get_env: GetEnv, name: str) -> str:
    return get_env(name) or ""


def _current_goos() -> str:
    return "windows" if os.name == "nt" else sys.platform


def _slash_join(*parts: str) -> str:
    joined = "/".join(part for part in parts if part)
    return posixpath.normpath(joined) if joined else ""


def paths(explicit_path: str, get_env: GetEnv) -> list[str]:
    """Return the kubeconfig files to consider.

    An explicit path wins; otherwise the entries of $KUBECONFIG; otherwise
    $HOME/.kube/config.
    """
    if explicit_path:
        return [explicit_path]
    from_env = discard_empty_and_duplicates(_env(get_env, KUBECONFIG_ENV).split(os.pathsep))
    if from_env:
        return from_env
    return [_slash_join(home_dir(_current_goos(), get_env), ".kube", "config")]


def path_for_merge(explicit_path: str, get_env: GetEnv) -> str:
    """Return the file kubectl would merge into: the first existing one, else the last."""
    candidates = paths(explicit_path, get_env)
    if len(candidates) == 1:
        return candidates[0]
    return next((name for name in candidates if file_exists(name)), candidates[-1])


def file_exists(filename: str) -> bool:
    """Tell whether filename exists and is not a directory."""
    try:
        info = os.stat(filename)
    except FileNotFoundError:
        return False
    return not stat.S_ISDIR(info.st_mode)


def discard_empty_and_duplicates(paths: Iterable[str]) -> list[str]:
    """Drop empty entries and repeats, keeping the first occurrence order."""
    return list(dict.fromkeys(p for p in paths if p))


def home_dir(goos: str, get_env: GetEnv) -> str:
    """Return the current user's home directory.

    On Windows the first of HOME, HOMEDRIVE+HOMEPATH, USERPROFILE holding a
    .kube/config file wins; then the first of HOME, USERPROFILE,
    HOMEDRIVE+HOMEPATH that is a writeable directory; then the first that
    exists; then the first that is set.
    """
    if goos != "windows":
        return _env(get_env, "HOME")

    home = _env(get_env, "HOME")
    home_drive, home_path = _env(get_env, "HOMEDRIVE"), _env(get_env, "HOMEPATH")
    home_drive_home_path = home_drive + home_path if home_drive and home_path else ""
    user_profile = _env(get_env, "USERPROFILE")

    for candidate in (home, home_drive_home_path, user_profile):
        if candidate and os.path.exists(os.path.join(candidate, ".kube", "config")):
            return candidate

    first_set = ""
    first_existing = ""
    for candidate in (home, user_profile, home_drive_home_path):
        if not candidate:
            continue
        first_set = first_set or candidate
        try:
            info = os.stat(candidate)
        except OSError:
            continue
        first_existing = first_existing or candidate
        if stat.S_ISDIR(info.st_mode) and stat.S_IMODE(info.st_mode) & stat.S_IWUSR:
            return candidate

    return first_existing or first_set