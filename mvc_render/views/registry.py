"""Startup-populated registry of dynamic view handlers.

Views are registered under their handler path (``("admin", "users")``)
together with the sub-actions they support. A render call looks the view up
by the identity parsed from the page string; nothing is imported or resolved
by name while a request is being served.
"""

from collections.abc import Callable, Iterable, Iterator, Sequence
from importlib import import_module
from typing import Any

from mvc_render.exceptions import ConfigurationException, ErrorCode, ViewNotFoundException
from mvc_render.logging_config import get_logger, log_with_context
from mvc_render.models.render_models import ViewIdentity
from mvc_render.protocols import ViewFactory
from mvc_render.views.page_resolver import PATH_SEPARATOR, VIEWS_NAMESPACE
from mvc_render.views.page_view import PageView

logger = get_logger(__name__)

REGISTER_HOOK = "register_views"


class RegisteredView:
    """A view factory and the sub-actions it answers."""

    def __init__(self, handler_path: tuple[str, ...], factory: ViewFactory, actions: frozenset[str]):
        self.handler_path = handler_path
        self.factory = factory
        self.actions = actions

    def supports(self, sub_action: str | None) -> bool:
        return sub_action is None or sub_action in self.actions

    def __repr__(self) -> str:
        return f"RegisteredView({'/'.join(self.handler_path)!r}, actions={sorted(self.actions)!r})"


def _path_key(handler_path: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(handler_path, str):
        return tuple(handler_path.strip(PATH_SEPARATOR).split(PATH_SEPARATOR))
    return tuple(handler_path)


class ViewRegistry:
    """Maps handler paths to view factories."""

    def __init__(self, namespace: str = VIEWS_NAMESPACE):
        self.namespace = namespace
        self._views: dict[tuple[str, ...], RegisteredView] = {}

    def register(
        self,
        handler_path: str | Sequence[str],
        factory: ViewFactory,
        actions: Iterable[str] | None = None,
    ) -> RegisteredView:
        """Register a view factory.

        Args:
            handler_path: ``"admin/users"`` or ``("admin", "users")``
            factory: Callable taking the render data and returning a Renderable
            actions: Supported sub-actions; defaults to the ``page_actions``
                declared on a PageView subclass

        Raises:
            ConfigurationException: If the path is already registered
        """
        key = _path_key(handler_path)
        if key in self._views:
            raise ConfigurationException(
                f"View '{PATH_SEPARATOR.join(key)}' is already registered",
                code=ErrorCode.CONFIG_INVALID,
                details={"view": PATH_SEPARATOR.join(key)},
            )

        if actions is None:
            actions = getattr(factory, "page_actions", {}).keys()
        if isinstance(factory, type) and issubclass(factory, PageView) and not factory.view_path:
            factory.view_path = key

        entry = RegisteredView(key, factory, frozenset(actions))
        self._views[key] = entry
        log_with_context(
            logger,
            "debug",
            "View registered",
            view=PATH_SEPARATOR.join(key),
            actions=sorted(entry.actions),
            event_type="view_registered",
        )
        return entry

    def view(self, handler_path: str | Sequence[str]) -> Callable[[type[PageView]], type[PageView]]:
        """Class decorator registering a PageView subclass."""

        def decorator(cls: type[PageView]) -> type[PageView]:
            self.register(handler_path, cls)
            return cls

        return decorator

    def lookup(self, identity: ViewIdentity) -> RegisteredView:
        """Find the view for an identity and check it supports the sub-action.

        Raises:
            ViewNotFoundException: If the path is unknown or the action unsupported
        """
        entry = self._views.get(identity.handler_path)
        if entry is None:
            raise ViewNotFoundException(identity.handler_path)
        if not entry.supports(identity.sub_action):
            raise ViewNotFoundException(identity.handler_path, identity.sub_action)
        return entry

    def paths(self) -> list[str]:
        return sorted(PATH_SEPARATOR.join(key) for key in self._views)

    def __contains__(self, handler_path: Any) -> bool:
        if not isinstance(handler_path, str | tuple | list):
            return False
        return _path_key(handler_path) in self._views

    def __iter__(self) -> Iterator[RegisteredView]:
        return iter(self._views.values())

    def __len__(self) -> int:
        return len(self._views)


def load_view_modules(registry: ViewRegistry, module_names: Iterable[str]) -> None:
    """Import view modules and let each register its views.

    Every module must define ``register_views(registry)``.

    Raises:
        ConfigurationException: If a module cannot be imported or has no hook
    """
    for module_name in module_names:
        try:
            module = import_module(module_name)
        except ImportError as e:
            raise ConfigurationException(
                f"Cannot import view module '{module_name}': {e}",
                code=ErrorCode.CONFIG_INVALID,
                details={"module": module_name},
            ) from e

        register = getattr(module, REGISTER_HOOK, None)
        if register is None:
            raise ConfigurationException(
                f"View module '{module_name}' does not define {REGISTER_HOOK}(registry)",
                code=ErrorCode.CONFIG_INVALID,
                details={"module": module_name},
            )
        register(registry)
        log_with_context(
            logger,
            "info",
            "View module loaded",
            view_module=module_name,
            registered_views=len(registry),
            event_type="view_module_loaded",
        )
