"""Unit tests for configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest

from mvc_render.config import BASE_DIR, Settings, get_settings


def test_settings_defaults():
    """Settings start without any environment."""
    settings = Settings()

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.log_level == "INFO"
    assert settings.document_root == BASE_DIR
    assert settings.views_dir == "src/Views"
    assert settings.script_name is None
    assert settings.view_modules == []


def test_views_root_joins_base_url(tmp_path):
    settings = Settings(document_root=tmp_path, base_url="/shop/", views_dir="src/Views")

    assert settings.base_url == "shop"
    assert settings.views_root == tmp_path / "shop" / "src" / "Views"


def test_views_root_without_base_url(tmp_path):
    assert Settings(document_root=tmp_path).views_root == tmp_path / "src" / "Views"


def test_relative_templates_dir_anchored_at_document_root(tmp_path):
    assert Settings(document_root=tmp_path, templates_dir=Path("templates")).templates_root == tmp_path / "templates"


def test_absolute_templates_dir_kept(tmp_path):
    assert Settings(templates_dir=tmp_path).templates_root == tmp_path


def test_log_level_normalized():
    assert Settings(log_level="debug").log_level == "DEBUG"


def test_invalid_log_level():
    with pytest.raises(ValueError):
        Settings(log_level="chatty")


def test_blank_api_host_rejected():
    with pytest.raises(ValueError):
        Settings(api_host="   ")


def test_settings_env_loading():
    """Settings are read from MVC_RENDER_* variables."""
    with patch.dict(
        "os.environ",
        {
            "MVC_RENDER_API_PORT": "9000",
            "MVC_RENDER_SCRIPT_NAME": "/app/index.py",
            "MVC_RENDER_VIEW_MODULES": '["myapp.views"]',
        },
    ):
        settings = Settings()

    assert settings.api_port == 9000
    assert settings.script_name == "/app/index.py"
    assert settings.view_modules == ["myapp.views"]


def test_get_settings_is_singleton():
    with patch("mvc_render.config._settings_instance", None):
        first = get_settings()
        second = get_settings()

    assert first is second
