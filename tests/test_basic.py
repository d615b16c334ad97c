# Basic tests
def test_root_endpoint(client):
    """Test the root endpoint."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "NoteLayer API", "version": "1.0.0"}


def test_health_endpoint(client):
    """Test health check."""
    client.post("/notes/", json={"name": "a", "content": "b"})

    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["version"] == "1.0.0"
    assert data["checks"]["storage"]["backend"] == "memory"
    assert data["checks"]["storage"]["notes"] == 1


def test_package_imports():
    """Test that the layers can be imported."""
    from notelayer.apps import new_application
    from notelayer.core.storage import IStorage, InMemoryStorage, SqlStorage
    from notelayer.core.usecases import new_usecases
    from notelayer.parsers import NoteParsers
    from notelayer.presenters import JsonPresenter, ReplPresenter

    assert issubclass(InMemoryStorage, IStorage)
    assert issubclass(SqlStorage, IStorage)
    assert new_usecases is not None and new_application is not None
    assert NoteParsers is not None and JsonPresenter is not None and ReplPresenter is not None
