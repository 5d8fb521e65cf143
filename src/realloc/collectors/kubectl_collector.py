# src/realloc/collectors/kubectl_collector.py
"""
Reads pod descriptors through the kubectl CLI (`kubectl get pod -o=json`).
Useful where the resolver runs as a kubectl plugin with the user's kubeconfig.
"""

import asyncio
import json
import logging
from typing import Any, Dict

from ..core.config import Config
from ..core.exceptions import ClusterLookupError
from ..models.pod import ContainerStatus, PodDescriptor
from ..utils.process import run_command
from .base_collector import ClusterStateReader

logger = logging.getLogger(__name__)


def pod_descriptor_from_json(data: Dict[str, Any]) -> PodDescriptor:
    """Builds a PodDescriptor from the JSON form of a pod object."""
    metadata = data.get("metadata") or {}
    status = data.get("status") or {}

    statuses = [
        ContainerStatus(
            name=item.get("name", ""),
            container_id=item.get("containerID"),
            image=item.get("image"),
            ready=bool(item.get("ready", False)),
            restart_count=item.get("restartCount", 0),
        )
        for item in status.get("containerStatuses") or []
    ]

    return PodDescriptor(
        name=metadata.get("name", ""),
        namespace=metadata.get("namespace") or "default",
        host_ip=status.get("hostIP"),
        pod_ip=status.get("podIP"),
        phase=status.get("phase"),
        creation_timestamp=metadata.get("creationTimestamp"),
        container_statuses=statuses,
    )


class KubectlPodReader(ClusterStateReader):
    """Shells out to kubectl for each pod read."""

    def __init__(self, binary: str = "kubectl", timeout: float = 30.0):
        self.binary = binary
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> "KubectlPodReader":
        return cls(binary=config.KUBECTL_BINARY, timeout=config.CLUSTER_STATE_TIMEOUT)

    async def read_pod(self, name: str, namespace: str) -> PodDescriptor:
        argv = [self.binary, "get", "pod", name, "--namespace", namespace, "-o=json"]
        try:
            result = await run_command(argv, timeout=self.timeout)
        except FileNotFoundError:
            raise ClusterLookupError(f"kubectl binary not found: {self.binary}") from None
        except asyncio.TimeoutError:
            raise ClusterLookupError(f"timed out reading pod {namespace}/{name} after {self.timeout:g}s") from None
        except OSError as e:
            raise ClusterLookupError(f"failed to run kubectl: {e}") from e

        if not result.ok:
            raise ClusterLookupError(result.error_text())

        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as e:
            raise ClusterLookupError(f"kubectl returned invalid JSON for pod {namespace}/{name}: {e}") from e

        return pod_descriptor_from_json(data)
