"""
Command line interface for schemaorg_ld.
"""

from .main import cli

__all__ = ["cli"]
