from pathlib import Path

import pytest

from studyparse.config.settings import Settings
from studyparse.processor.processor import Processor, build_processor
from studyparse.storage.local_store import LocalBlobStore


@pytest.fixture()
def files_root(tmp_path: Path) -> Path:
    root = tmp_path / "files"
    root.mkdir()
    return root


@pytest.fixture()
def blob_store(files_root: Path) -> LocalBlobStore:
    return LocalBlobStore(root=files_root)


@pytest.fixture()
def processor(files_root: Path, monkeypatch: pytest.MonkeyPatch) -> Processor:
    monkeypatch.setenv("RECOGNITION_PROVIDER", "none")
    monkeypatch.setenv("STORAGE_PUBLIC_BASE_URL", "")
    return build_processor(Settings(), files_root=files_root)
