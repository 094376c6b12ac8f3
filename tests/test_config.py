# tests/test_config.py
import logging

from clothing_catalog.config import Settings, get_settings
from clothing_catalog.logging_setup import init_logging


def test_defaults_point_at_local_service(monkeypatch):
    monkeypatch.delenv("CATALOG_BASE_URL", raising=False)
    s = Settings(_env_file=None)
    assert s.base_url == "http://localhost:3001"
    assert s.message_clear_delay == 3.0


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CATALOG_BASE_URL", "http://catalog:8080")
    monkeypatch.setenv("CATALOG_MESSAGE_CLEAR_DELAY", "0.5")
    get_settings.cache_clear()
    try:
        s = get_settings()
        assert s.base_url == "http://catalog:8080"
        assert s.message_clear_delay == 0.5
    finally:
        get_settings.cache_clear()


def test_init_logging_installs_one_handler():
    root = logging.getLogger()
    before = len(root.handlers)
    init_logging("DEBUG")
    init_logging("WARNING")
    assert len(root.handlers) - before <= 1
    assert root.level == logging.WARNING
