"""Unit tests for the dynamic view registry."""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

from mvc_render.exceptions import ConfigurationException, ErrorCode, ViewNotFoundException
from mvc_render.views.page_resolver import resolve
from mvc_render.views.page_view import PageView, page_action
from mvc_render.views.registry import ViewRegistry, load_view_modules


class ReportView(PageView):
    def render_default(self) -> str:
        return "report"

    @page_action()
    def daily_page(self) -> str:
        return f"daily {self.data['day']}"

    @page_action("yearly")
    def summary(self) -> str:
        return "yearly"


class DetailedReportView(ReportView):
    @page_action()
    def detail_page(self) -> str:
        return "detail"


class TestPageView:
    """Tests for PageView action collection."""

    def test_actions_collected(self):
        assert ReportView.page_actions == {"daily": "daily_page", "yearly": "summary"}

    def test_actions_inherited(self):
        assert set(DetailedReportView.page_actions) == {"daily", "yearly", "detail"}
        assert "detail" not in ReportView.page_actions

    def test_construction_only_binds_data(self):
        view = ReportView({"day": "monday"})

        assert view.data == {"day": "monday"}

    def test_render_action(self):
        assert ReportView({"day": "monday"}).render_action("daily") == "daily monday"

    def test_unknown_action(self):
        with pytest.raises(ViewNotFoundException) as exc_info:
            ReportView({}).render_action("weekly")

        assert exc_info.value.code == ErrorCode.VIEW_ACTION_NOT_FOUND

    def test_render_default_must_be_implemented(self):
        class Bare(PageView):
            pass

        with pytest.raises(NotImplementedError):
            Bare({}).render_default()


class TestViewRegistry:
    """Tests for ViewRegistry."""

    def test_register_and_lookup(self):
        registry = ViewRegistry()
        registry.register("reports/sales", ReportView)

        entry = registry.lookup(resolve("reports/sales:daily"))

        assert entry.factory is ReportView
        assert entry.actions == frozenset({"daily", "yearly"})
        assert ("reports", "sales") in registry
        assert "reports/sales" in registry
        assert len(registry) == 1

    def test_register_sets_view_path(self):
        class Orders(PageView):
            def render_default(self) -> str:
                return ""

        ViewRegistry().register(("shop", "orders"), Orders)

        assert Orders.view_path == ("shop", "orders")

    def test_decorator_registration(self):
        registry = ViewRegistry()

        @registry.view("home")
        class Home(PageView):
            def render_default(self) -> str:
                return "home"

        assert registry.lookup(resolve("home")).factory is Home

    def test_plain_factory_with_explicit_actions(self):
        registry = ViewRegistry()
        factory = lambda data: SimpleNamespace(render_default=lambda: "x", render_action=lambda name: name)  # noqa: E731
        registry.register("misc", factory, actions=["ping"])

        assert registry.lookup(resolve("misc:ping")).factory is factory

    def test_unknown_view(self):
        with pytest.raises(ViewNotFoundException) as exc_info:
            ViewRegistry().lookup(resolve("nope"))

        assert exc_info.value.code == ErrorCode.VIEW_NOT_FOUND

    def test_unknown_action_fails_before_construction(self):
        registry = ViewRegistry()
        registry.register("reports", ReportView)

        with pytest.raises(ViewNotFoundException) as exc_info:
            registry.lookup(resolve("reports:weekly"))

        assert exc_info.value.code == ErrorCode.VIEW_ACTION_NOT_FOUND

    def test_duplicate_registration(self):
        registry = ViewRegistry()
        registry.register("reports", ReportView)

        with pytest.raises(ConfigurationException):
            registry.register("/reports/", DetailedReportView)

    def test_paths_sorted(self):
        registry = ViewRegistry()
        registry.register("b/x", ReportView)
        registry.register("a", DetailedReportView)

        assert registry.paths() == ["a", "b/x"]


class TestLoadViewModules:
    """Tests for load_view_modules()."""

    def test_calls_register_hook(self):
        def register_views(registry):
            registry.register("reports", ReportView)

        registry = ViewRegistry()
        with patch(
            "mvc_render.views.registry.import_module",
            return_value=SimpleNamespace(register_views=register_views),
        ) as mock_import:
            load_view_modules(registry, ["myapp.views"])

        mock_import.assert_called_once_with("myapp.views")
        assert "reports" in registry

    def test_module_without_hook(self):
        with patch("mvc_render.views.registry.import_module", return_value=SimpleNamespace()):
            with pytest.raises(ConfigurationException) as exc_info:
                load_view_modules(ViewRegistry(), ["myapp.views"])

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID

    def test_missing_module(self):
        with pytest.raises(ConfigurationException):
            load_view_modules(ViewRegistry(), ["mvc_render_no_such_module"])
