"""Static HTML lookup scoped to the views directory."""

from pathlib import Path

from mvc_render.exceptions import StaticAssetMissingException


def locate(views_root: Path, page: str | None) -> Path:
    """Resolve a page name to a readable file inside ``views_root``.

    Args:
        views_root: Directory static pages are served from
        page: Page name relative to the views directory

    Returns:
        Absolute path of the page file

    Raises:
        StaticAssetMissingException: If the page is empty, escapes the views
            directory or is not an existing regular file
    """
    if not page:
        raise StaticAssetMissingException(page)

    root = views_root.resolve()
    candidate = (root / page.lstrip("/")).resolve()
    if not candidate.is_relative_to(root) or not candidate.is_file():
        raise StaticAssetMissingException(page)
    return candidate


def read(path: Path) -> bytes:
    """Read a located page verbatim."""
    return path.read_bytes()
