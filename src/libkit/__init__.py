"""libkit: scaffolding kit for new library projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("libkit")
except PackageNotFoundError:
    __version__ = "0.0.0"
