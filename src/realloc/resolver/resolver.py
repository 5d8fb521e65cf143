# src/realloc/resolver/resolver.py
"""
Turns a (namespace, pod, container) reference into resize requests for the
node agent running on the pod's host.
"""

import logging
from typing import Callable, List, NamedTuple, Optional

from ..collectors.base_collector import ClusterStateReader
from ..core.config import Config
from ..models.resources import ResizeRequest, ResourceKind
from .agent_client import AgentClient

logger = logging.getLogger(__name__)


class ResolvedTarget(NamedTuple):
    host: str
    container_id: str


class ResizeValues(NamedTuple):
    """Raw values as supplied by the operator; None or '' means not requested."""

    cpu: Optional[str] = None
    memory: Optional[str] = None
    bandwidth: Optional[str] = None

    def requested(self) -> List[tuple]:
        """(kind, raw value) pairs in send order: cpu, memory, bandwidth."""
        pairs = [
            (ResourceKind.CPU, self.cpu),
            (ResourceKind.MEMORY, self.memory),
            (ResourceKind.BANDWIDTH, self.bandwidth),
        ]
        return [(kind, value) for kind, value in pairs if value]


def build_requests(container_id: str, values: ResizeValues) -> List[ResizeRequest]:
    return [ResizeRequest(kind=kind, raw_value=value, container=container_id) for kind, value in values.requested()]


class Resolver:
    """
    Resolves a pod's container to its node and runtime id, then resizes it.

    Lookup and transport errors propagate to the caller; the first failure
    stops the remaining sends.
    """

    def __init__(
        self,
        config: Config,
        reader: ClusterStateReader,
        agent: AgentClient,
        echo: Callable[[str], None] = print,
    ):
        self.default_namespace = config.DEFAULT_NAMESPACE
        self.reader = reader
        self.agent = agent
        self.echo = echo

    async def resolve(self, pod: str, container: str, namespace: Optional[str] = None) -> ResolvedTarget:
        namespace = namespace or self.default_namespace
        descriptor = await self.reader.read_pod(pod, namespace)
        container_id = descriptor.get_container_id(container)
        host = descriptor.get_host()
        logger.info("Resolved %s/%s container '%s' to %s on host %s", namespace, pod, container, container_id, host)
        return ResolvedTarget(host=host, container_id=container_id)

    async def resize(
        self,
        pod: str,
        container: str,
        values: ResizeValues,
        namespace: Optional[str] = None,
    ) -> List[str]:
        """Resolves the target and sends one request per supplied value, echoing each response."""
        target = await self.resolve(pod, container, namespace)

        requests = build_requests(target.container_id, values)
        if not requests:
            logger.warning("No cpu, memory or bandwidth value given; nothing to resize.")

        responses = []
        for request in requests:
            body = await self.agent.send(target.host, request)
            self.echo(body)
            responses.append(body)
        return responses

    async def close(self):
        await self.reader.close()
        await self.agent.close()
