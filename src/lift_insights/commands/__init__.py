"""CLI commands for lift-insights."""

from .analytics import records, recovery
from .clients import clients
from .init import init
from .log import log
from .serve import serve

__all__ = [
    "clients",
    "init",
    "log",
    "records",
    "recovery",
    "serve",
]
