"""
Smoothie - Filament skills installer

Discovers bundled and project-local skill bundles, renders them for the
chosen editor or coding agent, and registers them with that tool.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("smoothie")
except PackageNotFoundError:
    __version__ = "0.3.0"

__all__ = [
    "__version__",
]
