"""Parse page identifiers such as ``admin/users:list`` into view identities."""

from mvc_render.models.render_models import ViewIdentity

VIEWS_NAMESPACE = "Views"
ACTION_SEPARATOR = ":"
PATH_SEPARATOR = "/"


def resolve(page: str) -> ViewIdentity:
    """Split a page string into a handler path and an optional sub-action.

    The string is trimmed of slashes and split on the first colon. The left
    part is split on ``/`` into handler path segments; the right part, if
    non-empty, names the sub-action. Resolution is purely syntactic.

    Examples:
        >>> resolve("admin/users:list").handler_path
        ('admin', 'users')
        >>> resolve("home").sub_action is None
        True
    """
    view_part, _, sub_action = page.strip(PATH_SEPARATOR).partition(ACTION_SEPARATOR)
    segments = tuple(view_part.strip(PATH_SEPARATOR).split(PATH_SEPARATOR))
    return ViewIdentity(
        handler_path=segments,
        sub_action=sub_action or None,
        namespace=VIEWS_NAMESPACE,
    )
