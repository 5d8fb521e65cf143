# src/realloc/models/pod.py

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import ClusterLookupError, ContainerNotFoundError


def strip_scheme(container_id: str) -> str:
    """Removes a runtime scheme prefix: 'docker://abc123' -> 'abc123'."""
    _, sep, rest = container_id.partition("://")
    return rest if sep else container_id


class ContainerStatus(BaseModel):
    """Runtime status of one container as reported in the pod status."""

    name: str = Field(..., description="Container name from the pod spec")
    container_id: Optional[str] = Field(None, description="Runtime id, prefixed with a scheme such as docker://")
    image: Optional[str] = Field(None, description="Image the container runs")
    ready: bool = Field(False, description="Whether the container passed its readiness checks")
    restart_count: int = Field(0, description="Number of restarts")


class PodDescriptor(BaseModel):
    """
    Snapshot of a pod's placement and container statuses.

    Attributes:
        name: Pod name
        namespace: Pod namespace
        host_ip: Address of the node the pod runs on
        pod_ip: Address of the pod itself
        phase: Pod phase (Pending, Running, ...)
        creation_timestamp: When the pod object was created
        container_statuses: Per-container runtime statuses
    """

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = "default"
    host_ip: Optional[str] = None
    pod_ip: Optional[str] = None
    phase: Optional[str] = None
    creation_timestamp: Optional[datetime] = None
    container_statuses: List[ContainerStatus] = Field(default_factory=list)

    def get_container_id(self, name: str) -> str:
        """
        Returns the runtime container id of the named container.

        The name is matched case-insensitively and the scheme prefix of the id
        is removed.
        """
        wanted = name.casefold()
        for status in self.container_statuses:
            if status.name.casefold() == wanted:
                if not status.container_id:
                    raise ContainerNotFoundError(f"container {name} has no runtime id yet")
                return strip_scheme(status.container_id)

        raise ContainerNotFoundError("container not found")

    def get_host(self) -> str:
        if not self.host_ip:
            raise ClusterLookupError(f"pod {self.namespace}/{self.name} has no host address (phase: {self.phase})")
        return self.host_ip
