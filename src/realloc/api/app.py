# src/realloc/api/app.py
"""
FastAPI application factory for the realloc node agent.

The agent is stateless: every request is parsed, executed and answered on
its own. The runtime executor is injected so tests can run the app without
touching a real container runtime.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from realloc import __version__
from realloc.api.routers import health, resize
from realloc.core.config import Config
from realloc.core.exceptions import ExecutionError, RequestError
from realloc.core.factory import get_runtime_executor as factory_get_runtime_executor
from realloc.runtime.executor import RuntimeExecutor

logger = logging.getLogger(__name__)


def create_app(config: Optional[Config] = None, executor: Optional[RuntimeExecutor] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Configuration to build the default executor from. A fresh
                Config is read from the environment when omitted.
        executor: The runtime executor to use. Tests pass a fake here.

    Returns:
        A configured FastAPI application instance.
    """
    if executor is None:
        executor = factory_get_runtime_executor(config or Config().validate_instance())

    app = FastAPI(
        title="realloc agent",
        description="Applies live CPU, memory and bandwidth changes to containers on this node.",
        version=__version__,
    )
    app.state.executor = executor

    app.include_router(resize.router, tags=["Resize"])
    app.include_router(health.router, tags=["Health"])

    _register_exception_handlers(app)

    return app


def _register_exception_handlers(app: FastAPI) -> None:
    """Errors are answered with a plain-text body carrying the message."""

    @app.exception_handler(RequestError)
    async def request_error_handler(request: Request, exc: RequestError):
        logger.warning("Rejected resize request %s: %s", request.url.query, exc)
        return PlainTextResponse(str(exc), status_code=400)

    @app.exception_handler(ExecutionError)
    async def execution_error_handler(request: Request, exc: ExecutionError):
        logger.error("Runtime command failed: %s", exc)
        return PlainTextResponse(str(exc), status_code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        detail = "method not allowed" if exc.status_code == 405 else str(exc.detail)
        return PlainTextResponse(detail, status_code=exc.status_code, headers=getattr(exc, "headers", None))


def run(config: Config, host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Serve the agent with uvicorn until interrupted."""
    app = create_app(config)
    bind_host = host or config.AGENT_HOST
    bind_port = port or config.AGENT_PORT
    logger.info("Running realloc agent on %s:%s...", bind_host, bind_port)
    uvicorn.run(app, host=bind_host, port=bind_port, log_level=config.LOG_LEVEL.lower())


def main():
    """Entry point for the realloc-agent console script."""
    config = Config().validate_instance()
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    run(config)
