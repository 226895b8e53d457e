"""CLI command modules - exports all commands"""
from .actions import actions
from .run import run
from .config import config
from .serve import serve

__all__ = ["actions", "run", "config", "serve"]
