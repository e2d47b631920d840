"""MVC Render - format-dispatching response renderer"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("mvc-render")
except PackageNotFoundError:
    __version__ = "dev"
