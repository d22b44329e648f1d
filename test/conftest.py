"""
Shared fixtures: a fake remote store on the local filesystem and a catalogue
pointing at it.
"""

import hashlib
import logging

import pytest

from funcotator_datasources.tools.catalogue import GERMLINE, SOMATIC, DataSourceReference

ARCHIVE_NAME = 'funcotator_dataSources.v1.4.20180615.tar.gz'
CHECKSUM_NAME = 'funcotator_dataSources.v1.4.20180615.sha256'
ARCHIVE_BYTES = b'\x1f\x8b\x08\x00fake-datasources' * 1000


@pytest.fixture
def remote_dir(tmp_path):
    """A directory standing in for the remote bucket."""
    remote = tmp_path / 'remote'
    remote.mkdir()
    (remote / ARCHIVE_NAME).write_bytes(ARCHIVE_BYTES)
    (remote / CHECKSUM_NAME).write_text(hashlib.sha256(ARCHIVE_BYTES).hexdigest())
    return remote


@pytest.fixture
def catalogue(remote_dir):
    return {
        SOMATIC: None,
        GERMLINE: DataSourceReference(
            GERMLINE,
            str(remote_dir / ARCHIVE_NAME),
            str(remote_dir / CHECKSUM_NAME),
        ),
    }


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """An empty current working directory for the downloads."""
    cwd = tmp_path / 'work'
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture(autouse=True)
def reset_root_logger():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
