# src/realloc/collectors/pod_collector.py
"""
Reads pod descriptors from the Kubernetes API.
"""

import asyncio
import logging

import aiohttp
from kubernetes_asyncio.client import CoreV1Api, V1Pod
from kubernetes_asyncio.client.rest import ApiException

from ..core.config import Config
from ..core.exceptions import ClusterLookupError
from ..core.k8s_client import get_api_client, load_k8s_config
from ..models.pod import ContainerStatus, PodDescriptor
from .base_collector import ClusterStateReader

logger = logging.getLogger(__name__)


def pod_descriptor_from_v1(pod: V1Pod) -> PodDescriptor:
    """Converts a kubernetes_asyncio V1Pod into a PodDescriptor."""
    status = pod.status
    statuses = []
    for container in (status.container_statuses if status else None) or []:
        statuses.append(
            ContainerStatus(
                name=container.name,
                container_id=container.container_id,
                image=container.image,
                ready=bool(container.ready),
                restart_count=container.restart_count or 0,
            )
        )

    return PodDescriptor(
        name=pod.metadata.name,
        namespace=pod.metadata.namespace or "default",
        host_ip=status.host_ip if status else None,
        pod_ip=status.pod_ip if status else None,
        phase=status.phase if status else None,
        creation_timestamp=pod.metadata.creation_timestamp,
        container_statuses=statuses,
    )


class KubernetesPodReader(ClusterStateReader):
    """
    Connects to the K8s API and reads a single pod by name and namespace.
    """

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> "KubernetesPodReader":
        return cls(timeout=config.CLUSTER_STATE_TIMEOUT)

    async def read_pod(self, name: str, namespace: str) -> PodDescriptor:
        await load_k8s_config()

        try:
            async with get_api_client() as api_client:
                api = CoreV1Api(api_client)
                pod = await asyncio.wait_for(
                    api.read_namespaced_pod(name=name, namespace=namespace),
                    timeout=self.timeout,
                )
        except ApiException as e:
            if e.status == 404:
                raise ClusterLookupError(f'pods "{name}" not found in namespace "{namespace}"') from e
            raise ClusterLookupError(f"Kubernetes API error while reading pod {namespace}/{name}: {e.reason}") from e
        except asyncio.TimeoutError:
            raise ClusterLookupError(f"timed out reading pod {namespace}/{name} after {self.timeout:g}s") from None
        except aiohttp.ClientError as e:
            raise ClusterLookupError(f"cannot reach Kubernetes API while reading pod {namespace}/{name}: {e}") from e

        descriptor = pod_descriptor_from_v1(pod)
        logger.debug(
            "Pod '%s/%s': host=%s, phase=%s, containers=%d",
            namespace,
            name,
            descriptor.host_ip,
            descriptor.phase,
            len(descriptor.container_statuses),
        )
        return descriptor
