import importlib
import os
import sys

import pytest


@pytest.fixture(autouse=True)
def app_import_isolation(monkeypatch):
    app_path = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    saved = sys.modules.pop("tenpin.main", None)
    monkeypatch.syspath_prepend(app_path)
    try:
        yield
    finally:
        sys.modules.pop("tenpin.main", None)
        if saved is not None:
            sys.modules["tenpin.main"] = saved


def test_rejects_wildcard_origin(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "*")
    monkeypatch.setenv("ALLOW_CREDENTIALS", "true")
    with pytest.raises(ValueError):
        importlib.import_module("tenpin.main")


def test_requires_allowed_origins(monkeypatch):
    monkeypatch.delenv("ALLOWED_ORIGINS", raising=False)
    monkeypatch.delenv("ALLOW_CREDENTIALS", raising=False)
    with pytest.raises(ValueError):
        importlib.import_module("tenpin.main")


def test_rejects_blank_origin_list(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", " , ,")
    with pytest.raises(ValueError, match="at least one"):
        importlib.import_module("tenpin.main")


def test_accepts_explicit_origins(monkeypatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://lanes.example.com, http://localhost:3000")
    monkeypatch.setenv("ALLOW_CREDENTIALS", "false")
    main = importlib.import_module("tenpin.main")
    assert main.ALLOWED_ORIGINS == ["https://lanes.example.com", "http://localhost:3000"]
    assert main.ALLOW_CREDENTIALS is False
