# src/realloc/collectors/base_collector.py
"""
This module defines the abstract base class for cluster-state readers.
The resolver only depends on this interface, so the Kubernetes API reader,
the kubectl reader and test fakes are interchangeable.
"""

from abc import ABC, abstractmethod

from ..models.pod import PodDescriptor


class ClusterStateReader(ABC):
    """
    Abstract Base Class for pod descriptor sources.
    """

    @abstractmethod
    async def read_pod(self, name: str, namespace: str) -> PodDescriptor:
        """
        Fetches a fresh descriptor for one pod.

        Raises:
            ClusterLookupError: If the pod cannot be read.
        """
        pass

    async def close(self):
        """
        Clean up resources (e.g., close API clients).
        """
        pass
