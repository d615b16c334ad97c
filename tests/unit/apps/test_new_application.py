"""
Unit tests for the composition root.
"""

import pytest

from notelayer.apps import AppMode, HttpApplication, ReplApplication, new_application
from notelayer.core.exceptions import ConfigurationError
from notelayer.core.storage import InMemoryStorage


def test_repl_mode(test_settings, memory_storage):
    app = new_application(AppMode.REPL, test_settings, storage=memory_storage)

    assert isinstance(app, ReplApplication)
    assert app.prompt == test_settings.repl_prompt
    assert app.usecases.create.storage is memory_storage


def test_http_mode_from_string(test_settings, memory_storage):
    app = new_application("HTTP", test_settings, storage=memory_storage)

    assert isinstance(app, HttpApplication)
    assert app.app.state.storage is memory_storage


def test_storage_built_from_settings(test_settings):
    app = new_application("repl", test_settings)

    assert isinstance(app.storage, InMemoryStorage)


def test_unknown_mode(test_settings):
    with pytest.raises(ConfigurationError, match="Unknown application mode"):
        new_application("gui", test_settings)


def test_http_run_serves_app_with_uvicorn(test_settings, memory_storage, monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    import notelayer.apps.http as http_module

    monkeypatch.setattr(http_module.uvicorn, "run", fake_run)

    app = new_application(AppMode.HTTP, test_settings, storage=memory_storage)
    app.run()

    assert calls["app"] is app.app
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 8000


def test_http_reload_uses_app_factory(test_settings, memory_storage, monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    import notelayer.apps.http as http_module

    monkeypatch.setattr(http_module.uvicorn, "run", fake_run)

    settings = test_settings.model_copy(update={"reload": True})
    new_application(AppMode.HTTP, settings, storage=memory_storage).run()

    assert calls["app"] == "notelayer.main:create_app"
    assert calls["factory"] is True
    assert calls["reload"] is True


def test_importing_main_builds_no_app():
    import notelayer.main

    assert not hasattr(notelayer.main, "app")
