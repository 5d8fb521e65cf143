# src/realloc/core/factory.py
"""
Factory functions to instantiate the pluggable components (cluster-state
reader, runtime executor) from a Config.
"""

import logging

from ..collectors.base_collector import ClusterStateReader
from ..collectors.kubectl_collector import KubectlPodReader
from ..collectors.pod_collector import KubernetesPodReader
from ..runtime.executor import CliRuntimeExecutor, RuntimeExecutor
from .config import Config

logger = logging.getLogger(__name__)


def get_cluster_state_reader(config: Config) -> ClusterStateReader:
    """Returns the pod descriptor source selected by CLUSTER_STATE_SOURCE."""
    if config.CLUSTER_STATE_SOURCE == "kubectl":
        logger.debug("Using kubectl cluster-state reader.")
        return KubectlPodReader.from_config(config)
    elif config.CLUSTER_STATE_SOURCE == "api":
        logger.debug("Using Kubernetes API cluster-state reader.")
        return KubernetesPodReader.from_config(config)
    raise ValueError(f"Unsupported CLUSTER_STATE_SOURCE: {config.CLUSTER_STATE_SOURCE}")


def get_runtime_executor(config: Config) -> RuntimeExecutor:
    """Returns the executor the node agent runs resize commands with."""
    logger.debug("Using runtime binary '%s'.", config.RUNTIME_BINARY)
    return CliRuntimeExecutor.from_config(config)
