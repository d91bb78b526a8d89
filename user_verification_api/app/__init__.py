"""
Application package initializer.

The package is split into ``core`` (settings, logging, database),
``schemas``, ``services`` (request handlers), ``client`` (the scripted
fake HTTP client) and ``api`` (versioned FastAPI routers).
"""

from .main import app  # noqa: F401
