# src/realloc/api/routers/resize.py
"""
The resize endpoint: one POST applies one resource change to one container.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from realloc.api.dependencies import get_runtime_executor
from realloc.api.schemas import ResizeResponse
from realloc.core.exceptions import MissingParameterError
from realloc.models.resources import parse_resource_command
from realloc.runtime.executor import RuntimeExecutor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=ResizeResponse)
async def resize(
    resource: Optional[str] = Query(None, description="Resource kind: cpu, memory or bandwidth."),
    value: Optional[str] = Query(None, description="Raw value, e.g. '500m', '256Mi', '10Mbps'."),
    container: Optional[str] = Query(None, description="Runtime container id."),
    executor: RuntimeExecutor = Depends(get_runtime_executor),
):
    """Parse the requested change, run it against the local runtime and return its output."""
    if not resource:
        raise MissingParameterError("resource not specified")
    if not value:
        raise MissingParameterError("no set value specified")
    if not container:
        raise MissingParameterError("no container specified")

    command = parse_resource_command(resource, value, container)
    args = command.args()
    logger.info("Executing runtime command: %s", args)

    output = await executor.execute(args)
    logger.info("Runtime output for %s on %s: %s", command.kind.value, container, output.strip())

    return ResizeResponse(output=output)
