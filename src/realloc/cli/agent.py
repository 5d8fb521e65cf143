"""
Implements the `agent` command: runs the node agent.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..api.app import run
from ..core.config import Config

logger = logging.getLogger(__name__)

app = typer.Typer(help="Run the node agent that applies resize requests.", add_completion=False)


@app.callback(invoke_without_command=True)
def agent(
    ctx: typer.Context,
    host: Annotated[Optional[str], typer.Option("--host", help="Address to bind (default: AGENT_HOST).")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on (default: AGENT_PORT).")] = None,
) -> None:
    """
    Serve resize requests for containers on this node.
    """
    config: Config = ctx.obj
    run(config, host=host, port=port)
