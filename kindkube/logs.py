"""Unpacking node log archives onto the host."""

from __future__ import annotations

import logging
import os
import shutil
import tarfile
from typing import BinaryIO

_log = logging.getLogger(__name__)

_CHUNK = 64 * 1024


class LogsError(Exception):
    """Raised when a log archive cannot be read or written out."""


class _WatchedStream:
    """Passes reads through and notes whether any non-zero byte went by."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self.saw_data = False

    def read(self, size: int = -1) -> bytes:
        chunk = self._stream.read(size)
        if chunk and not self.saw_data and chunk.strip(b"\0"):
            self.saw_data = True
        return chunk


def _drain(stream: BinaryIO) -> None:
    while stream.read(_CHUNK):
        pass


def _write_regular(archive: tarfile.TarFile, member: tarfile.TarInfo, target: str) -> None:
    fd = os.open(target, os.O_CREAT | os.O_RDWR, member.mode & 0o7777)
    written = 0
    try:
        with os.fdopen(fd, "wb") as out:
            source = archive.extractfile(member)
            if source is not None:
                while chunk := source.read(_CHUNK):
                    out.write(chunk)
                    written += len(chunk)
    except (OSError, tarfile.TarError) as err:
        raise LogsError(f"error writing to {target}: {err}") from err
    if written != member.size:
        raise LogsError(f"only wrote {written} bytes to {target}; expected {member.size}")


def untar(stream: BinaryIO, directory: str, logger: logging.Logger | None = None) -> None:
    """Unpack the tar archive read from stream into directory.

    Regular files and directories are written out; other entries are logged
    as warnings and skipped. The stream is read to its end afterwards.
    """
    logger = logger or _log
    watched = _WatchedStream(stream)
    try:
        archive = tarfile.open(fileobj=watched, mode="r|")  # type: ignore[call-overload]
    except tarfile.ReadError as err:
        if not watched.saw_data:
            _drain(stream)
            return
        raise LogsError(f"tar reading error: {err}") from err

    with archive:
        try:
            for member in archive:
                target = os.path.normpath(os.path.join(directory, *member.name.split("/")))
                if member.isreg():
                    _write_regular(archive, member, target)
                elif member.isdir():
                    if not os.path.exists(target):
                        os.makedirs(target, mode=0o755, exist_ok=True)
                else:
                    logger.warning(
                        "tar file entry %s contained unsupported file type %s",
                        member.name,
                        member.type.decode("latin-1"),
                    )
        except tarfile.TarError as err:
            raise LogsError(f"tar reading error: {err}") from err
    _drain(stream)


def copy_stream(source: BinaryIO, destination: BinaryIO) -> int:
    """Copy source to destination and return the number of bytes copied."""
    before = destination.tell() if destination.seekable() else 0
    shutil.copyfileobj(source, destination, _CHUNK)
    return (destination.tell() - before) if destination.seekable() else 0