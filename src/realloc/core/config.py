# src/realloc/core/config.py

import logging
import os

from dotenv import load_dotenv

# Load environment variables from a .env file located in the project root
dotenv_path = os.path.join(os.path.dirname(__file__), "..", "..", "..", ".env")
load_dotenv(dotenv_path=dotenv_path)

CLUSTER_STATE_SOURCES = ("api", "kubectl")

logger = logging.getLogger(__name__)


def _get_bool(key: str, default: str) -> bool:
    return os.getenv(key, default).lower() in ("true", "1", "t", "y", "yes")


class Config:
    """
    Handles the application's configuration by loading values from environment variables.

    A single instance is built at process entry (CLI command) and handed to the
    node agent and the resolver. Values are read when the instance is created,
    so tests can change the environment and build a fresh Config.
    """

    def __init__(self):
        # --- Logging variables ---
        self.LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

        # --- Node agent variables ---
        self.AGENT_HOST = os.getenv("AGENT_HOST", "0.0.0.0")
        self.AGENT_PORT = int(os.getenv("AGENT_PORT", "8000"))
        self.AGENT_SCHEME = os.getenv("AGENT_SCHEME", "http")

        # --- Container runtime variables ---
        self.RUNTIME_BINARY = os.getenv("RUNTIME_BINARY", "docker")
        self.RUNTIME_TIMEOUT = float(os.getenv("RUNTIME_TIMEOUT", "30"))

        # --- Cluster state variables ---
        self.CLUSTER_STATE_SOURCE = os.getenv("CLUSTER_STATE_SOURCE", "api").lower()
        self.KUBECTL_BINARY = os.getenv("KUBECTL_BINARY", "kubectl")
        self.CLUSTER_STATE_TIMEOUT = float(os.getenv("CLUSTER_STATE_TIMEOUT", "30"))
        self.DEFAULT_NAMESPACE = os.getenv("DEFAULT_NAMESPACE", "default")

        # --- HTTP client variables ---
        self.DEFAULT_TIMEOUT_CONNECT = float(os.getenv("DEFAULT_TIMEOUT_CONNECT", "5"))
        self.DEFAULT_TIMEOUT_READ = float(os.getenv("DEFAULT_TIMEOUT_READ", "60"))
        self.AGENT_VERIFY_CERTS = _get_bool("AGENT_VERIFY_CERTS", "True")

    USER_AGENT = "realloc-resolver"

    def validate_instance(self):
        if not 0 < self.AGENT_PORT < 65536:
            raise ValueError("AGENT_PORT must be between 1 and 65535.")
        if self.AGENT_SCHEME not in ("http", "https"):
            raise ValueError("AGENT_SCHEME must be 'http' or 'https'.")
        if self.CLUSTER_STATE_SOURCE not in CLUSTER_STATE_SOURCES:
            raise ValueError("CLUSTER_STATE_SOURCE must be 'api' or 'kubectl'.")
        for name in ("RUNTIME_TIMEOUT", "CLUSTER_STATE_TIMEOUT", "DEFAULT_TIMEOUT_CONNECT", "DEFAULT_TIMEOUT_READ"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be a positive number of seconds.")
        if not self.DEFAULT_NAMESPACE:
            logger.warning("DEFAULT_NAMESPACE is empty; falling back to 'default'.")
            self.DEFAULT_NAMESPACE = "default"
        return self
