"""
Application package initializer.

This package contains the main entrypoint for the API service and its
submodules: ``core`` (settings and logging), ``api`` (routers),
``schemas`` (pydantic models) and ``services`` (the fixed joke data).
"""

from .main import app  # noqa: F401
