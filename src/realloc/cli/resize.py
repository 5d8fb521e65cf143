"""
Implements the `resize` command: the resolver side of realloc.

Every option can also come from the KUBECTL_PLUGINS_LOCAL_FLAG_* environment
variables, so the command works unchanged as a legacy kubectl plugin.
"""

import asyncio
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import Config
from ..core.exceptions import ReallocError
from ..core.factory import get_cluster_state_reader
from ..resolver import AgentClient, ResizeValues, Resolver

logger = logging.getLogger(__name__)

app = typer.Typer(help="Resize a running container of a pod.", add_completion=False)

ENV_PREFIX = "KUBECTL_PLUGINS_LOCAL_FLAG_"


def build_resolver(config: Config) -> Resolver:
    return Resolver(
        config,
        reader=get_cluster_state_reader(config),
        agent=AgentClient(config),
        echo=typer.echo,
    )


@app.callback(invoke_without_command=True)
def resize(
    ctx: typer.Context,
    namespace: Annotated[
        Optional[str],
        typer.Option("--namespace", "-n", envvar=f"{ENV_PREFIX}NAMESPACE", help="Namespace of the pod."),
    ] = None,
    pod: Annotated[
        Optional[str],
        typer.Option("--pod", "-p", envvar=f"{ENV_PREFIX}POD", help="Name of the pod."),
    ] = None,
    container: Annotated[
        Optional[str],
        typer.Option("--container", "-c", envvar=f"{ENV_PREFIX}CONTAINER", help="Name of the container in the pod."),
    ] = None,
    cpu: Annotated[
        Optional[str],
        typer.Option("--cpu", envvar=f"{ENV_PREFIX}SET_CPU", help="New CPU in millicores, e.g. '500m'."),
    ] = None,
    memory: Annotated[
        Optional[str],
        typer.Option("--memory", envvar=f"{ENV_PREFIX}SET_MEMORY", help="New memory limit, e.g. '256Mi'."),
    ] = None,
    bandwidth: Annotated[
        Optional[str],
        typer.Option("--bandwidth", envvar=f"{ENV_PREFIX}SET_BANDWIDTH", help="New egress rate, e.g. '10Mbps'."),
    ] = None,
) -> None:
    """
    Resolve the container's node and runtime id, then apply each given value.
    """
    if not pod:
        typer.echo("pod name is required", err=True)
        raise typer.Exit(code=1)

    if not container:
        typer.echo("container name is required", err=True)
        raise typer.Exit(code=1)

    config: Config = ctx.obj
    values = ResizeValues(cpu=cpu, memory=memory, bandwidth=bandwidth)

    async def _resize_async():
        resolver = build_resolver(config)
        try:
            await resolver.resize(pod, container, values, namespace=namespace)
        finally:
            await resolver.close()

    try:
        asyncio.run(_resize_async())
    except ReallocError as e:
        logger.debug("Resize of %s/%s failed", namespace or config.DEFAULT_NAMESPACE, pod, exc_info=True)
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)
