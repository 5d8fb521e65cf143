# src/realloc/api/dependencies.py
"""
FastAPI dependency injection functions.

The runtime executor is attached to the application state by create_app, so
route handlers never build their own and tests can swap it through
app.dependency_overrides.
"""

from fastapi import Request

from realloc.runtime.executor import RuntimeExecutor


def get_runtime_executor(request: Request) -> RuntimeExecutor:
    """Provides the RuntimeExecutor the app was created with."""
    return request.app.state.executor
