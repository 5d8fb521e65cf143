"""
realloc - live resource reallocation for running Kubernetes containers.

A resolver turns a (namespace, pod, container) reference into a node host
and runtime container id, then asks the node agent on that host to apply a
new CPU share, memory limit, or egress bandwidth to the container.
"""

__version__ = "0.1.0"
