"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from mvc_render.config import Settings
from mvc_render.core.app_factory import create_app
from mvc_render.core.render_context import RenderContext
from mvc_render.dispatcher import RenderDispatcher
from mvc_render.models.render_models import RequestContext
from mvc_render.views.page_view import PageView, page_action
from mvc_render.views.registry import ViewRegistry


class UsersView(PageView):
    """Admin users view with a ``list`` action."""

    def render_default(self) -> str:
        return f"<h1>Users</h1><p>{self.data.get('count', 0)} users</p>"

    @page_action()
    def list_page(self) -> str:
        items = "".join(f"<li>{name}</li>" for name in self.data.get("names", []))
        return f"<ul>{items}</ul>"

    @page_action("export")
    def export_as_csv(self) -> str:
        return ",".join(self.data.get("names", []))


class HomeView(PageView):
    def render_default(self) -> str:
        return "Welcome home"


@pytest.fixture
def site_root(tmp_path):
    """Document root with static pages and templates under src/Views."""
    views = tmp_path / "src" / "Views"
    (views / "docs").mkdir(parents=True)
    (views / "index.html").write_text("<!DOCTYPE html><html><body>Home</body></html>", encoding="utf-8")
    (views / "docs" / "about.html").write_bytes(b"<p>About \xc3\xa9</p>")
    (views / "greeting.html").write_text("Hello {{ name }}!", encoding="utf-8")
    (views / "broken.html").write_text("{% if %}", encoding="utf-8")
    (views / "failing.html").write_text("{{ total / count }}", encoding="utf-8")
    (views / "inspect.html").write_text("{% debug %}", encoding="utf-8")
    (tmp_path / "secret.html").write_text("top secret", encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings(site_root):
    """Settings pointing at the temporary document root."""
    return Settings(document_root=site_root)


@pytest.fixture
def view_registry():
    """Registry with the sample dynamic views."""
    registry = ViewRegistry()
    registry.register("admin/users", UsersView)
    registry.register("home", HomeView)
    return registry


@pytest.fixture
def render_context(settings, view_registry):
    return RenderContext(settings, view_registry)


@pytest.fixture
def dispatcher(render_context):
    """Dispatcher for a front controller mounted at /app."""
    return RenderDispatcher(render_context, RequestContext(script_name="/app/index.py"))


@pytest.fixture
def test_client(settings, render_context):
    """FastAPI test client with lifespan context."""
    app = create_app(settings, render_context)
    with TestClient(app) as client:
        yield client
