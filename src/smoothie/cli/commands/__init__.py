"""
CLI commands for smoothie.
"""

from smoothie.cli.commands import install

__all__ = [
    "install",
]
