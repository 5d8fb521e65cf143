import logging

from kubernetes_asyncio import client, config

from .exceptions import ClusterLookupError

logger = logging.getLogger(__name__)


async def load_k8s_config() -> None:
    """
    Loads the Kubernetes configuration, in-cluster first, then the local kubeconfig.

    Raises:
        ClusterLookupError: If neither configuration can be loaded.
    """
    try:
        logger.debug("Attempting to load in-cluster Kubernetes config...")
        config.load_incluster_config()
        logger.debug("Loaded in-cluster Kubernetes configuration.")
        return
    except config.ConfigException:
        logger.debug("In-cluster config not found.")

    try:
        logger.debug("Attempting to load local kubeconfig...")
        await config.load_kube_config()
        logger.debug("Loaded Kubernetes configuration from kubeconfig file.")
    except (config.ConfigException, OSError) as e:
        raise ClusterLookupError(f"could not load any Kubernetes configuration: {e}") from e


def get_api_client() -> client.ApiClient:
    """Returns a new ApiClient; use it as an async context manager so it gets closed."""
    return client.ApiClient()
