import io
import logging
import os
import stat
import tarfile

import pytest

from kindkube.logs import LogsError, copy_stream, untar


def _archive(entries):
    buffer = io.BytesIO()
    with tarfile.open(fileobj=buffer, mode="w") as archive:
        for name, kind, payload, mode in entries:
            info = tarfile.TarInfo(name)
            info.mode = mode
            if kind == "dir":
                info.type = tarfile.DIRTYPE
                archive.addfile(info)
            elif kind == "symlink":
                info.type = tarfile.SYMTYPE
                info.linkname = payload
                archive.addfile(info)
            else:
                info.size = len(payload)
                archive.addfile(info, io.BytesIO(payload))
    return buffer.getvalue()


def test_untar_writes_files_and_directories(tmp_path):
    data = _archive(
        [
            ("./", "dir", None, 0o755),
            ("./kubelet", "dir", None, 0o755),
            ("./kubelet/kubelet.log", "file", b"started kubelet\n", 0o644),
            ("./journal.log", "file", b"boot\nready\n", 0o644),
        ]
    )
    untar(io.BytesIO(data), str(tmp_path))
    assert (tmp_path / "kubelet").is_dir()
    assert (tmp_path / "kubelet" / "kubelet.log").read_bytes() == b"started kubelet\n"
    assert (tmp_path / "journal.log").read_bytes() == b"boot\nready\n"


def test_untar_applies_file_mode(tmp_path):
    data = _archive([("run.sh", "file", b"#!/bin/sh\n", 0o755)])
    untar(io.BytesIO(data), str(tmp_path))
    assert (tmp_path / "run.sh").read_bytes() == b"#!/bin/sh\n"
    mode = stat.S_IMODE(os.stat(tmp_path / "run.sh").st_mode)
    assert mode & stat.S_IRWXU == stat.S_IRWXU


def test_untar_warns_on_unsupported_entries(tmp_path, caplog):
    data = _archive(
        [
            ("link", "symlink", "target", 0o777),
            ("kept.txt", "file", b"kept", 0o644),
        ]
    )
    logger = logging.getLogger("test-untar")
    with caplog.at_level(logging.WARNING, logger="test-untar"):
        untar(io.BytesIO(data), str(tmp_path), logger)
    assert not os.path.lexists(tmp_path / "link")
    assert (tmp_path / "kept.txt").read_bytes() == b"kept"
    messages = [record.getMessage() for record in caplog.records]
    assert len(messages) == 1
    assert messages[0].startswith("tar file entry link contained unsupported file type")


def test_untar_drains_trailing_bytes(tmp_path):
    stream = io.BytesIO(_archive([("a.txt", "file", b"abc", 0o644)]) + b"\0" * 4096)
    untar(stream, str(tmp_path))
    assert stream.read() == b""
    assert (tmp_path / "a.txt").read_bytes() == b"abc"


def test_untar_empty_stream_is_not_an_error(tmp_path):
    stream = io.BytesIO(b"")
    untar(stream, str(tmp_path))
    assert list(tmp_path.iterdir()) == []


def test_untar_only_zero_blocks_is_not_an_error(tmp_path):
    stream = io.BytesIO(b"\0" * 1024)
    untar(stream, str(tmp_path))
    assert list(tmp_path.iterdir()) == []
    assert stream.read() == b""


def test_untar_rejects_garbage(tmp_path):
    with pytest.raises(LogsError):
        untar(io.BytesIO(b"this is not a tar archive" * 40), str(tmp_path))


def test_untar_missing_parent_directory_raises(tmp_path):
    data = _archive([("missing/inner.txt", "file", b"x", 0o644)])
    with pytest.raises(OSError):
        untar(io.BytesIO(data), str(tmp_path))


def test_copy_stream_counts_bytes():
    source = io.BytesIO(b"log line\n" * 3)
    destination = io.BytesIO()
    copied = copy_stream(source, destination)
    assert destination.getvalue() == b"log line\n" * 3
    assert copied == len(destination.getvalue())