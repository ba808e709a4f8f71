import pytest
from fastapi.testclient import TestClient

from app.api.deps import get_editor_sessions, get_note_repository
from app.main import app
from app.services.editor.registry import EditorSessionRegistry
from tests.fakes import FakeNoteRepository, FakeSurface

# Short debounce window so timing tests run quickly
DEBOUNCE = 0.05


@pytest.fixture()
def repo():
    return FakeNoteRepository()


@pytest.fixture()
def surface():
    return FakeSurface()


@pytest.fixture()
def registry():
    return EditorSessionRegistry(delay_seconds=DEBOUNCE)


@pytest.fixture()
def client(repo, registry):
    app.dependency_overrides[get_note_repository] = lambda: repo
    app.dependency_overrides[get_editor_sessions] = lambda: registry
    # Entering the client keeps its event loop alive between requests,
    # so scheduled autosaves can fire.
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
