from .base_collector import ClusterStateReader
from .kubectl_collector import KubectlPodReader
from .pod_collector import KubernetesPodReader

__all__ = [
    "ClusterStateReader",
    "KubectlPodReader",
    "KubernetesPodReader",
]
