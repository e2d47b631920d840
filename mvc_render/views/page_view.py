"""Base class for dynamic views with explicitly declared actions."""

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, TypeVar

from mvc_render.exceptions import ViewNotFoundException

ACTION_SUFFIX = "_page"

F = TypeVar("F", bound=Callable[..., str])


def page_action(name: str | None = None) -> Callable[[F], F]:
    """Declare a method as a sub-action page.

    The action name defaults to the method name without its ``_page`` suffix,
    so ``list_page`` answers ``admin/users:list``.
    """

    def decorator(func: F) -> F:
        func.__page_action__ = name or func.__name__.removesuffix(ACTION_SUFFIX)  # type: ignore[attr-defined]
        return func

    return decorator


class PageView:
    """Dynamic view bound to the data of one render call.

    Subclasses implement :meth:`render_default` and mark extra pages with
    :func:`page_action`.
    """

    view_path: ClassVar[tuple[str, ...]] = ()
    page_actions: ClassVar[dict[str, str]] = {}

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        actions: dict[str, str] = {}
        for klass in reversed(cls.__mro__):
            for attr_name, value in vars(klass).items():
                action = getattr(value, "__page_action__", None)
                if action is not None:
                    actions[action] = attr_name
        cls.page_actions = actions

    def __init__(self, data: Mapping[str, Any]):
        self.data = dict(data)

    def render_default(self) -> str:
        raise NotImplementedError(f"{type(self).__name__} does not implement render_default")

    def render_action(self, name: str) -> str:
        method_name = self.page_actions.get(name)
        if method_name is None:
            raise ViewNotFoundException(self.view_path or (type(self).__name__,), name)
        return getattr(self, method_name)()
