"""Command line interface for lambda-deploy"""

from .main import cli, main

__all__ = ["cli", "main"]
