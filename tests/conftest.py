# tests/conftest.py

from typing import List

import pytest

from realloc.collectors.base_collector import ClusterStateReader
from realloc.core.config import Config
from realloc.core.exceptions import ClusterLookupError, ExecutionError
from realloc.models.pod import ContainerStatus, PodDescriptor
from realloc.runtime.executor import RuntimeExecutor


@pytest.fixture(autouse=True)
def mock_settings_env_vars(monkeypatch):
    """
    Pytest fixture to pin the environment variables read by Config.

    This fixture runs automatically for every test (`autouse=True`) so that a
    developer's shell or .env file never changes test outcomes.
    """
    monkeypatch.setenv("LOG_LEVEL", "INFO")
    monkeypatch.setenv("AGENT_HOST", "0.0.0.0")
    monkeypatch.setenv("AGENT_PORT", "8000")
    monkeypatch.setenv("AGENT_SCHEME", "http")
    monkeypatch.setenv("RUNTIME_BINARY", "docker")
    monkeypatch.setenv("CLUSTER_STATE_SOURCE", "api")
    monkeypatch.setenv("DEFAULT_NAMESPACE", "default")
    for key in ("POD", "CONTAINER", "NAMESPACE", "SET_CPU", "SET_MEMORY", "SET_BANDWIDTH"):
        monkeypatch.delenv(f"KUBECTL_PLUGINS_LOCAL_FLAG_{key}", raising=False)


@pytest.fixture
def config():
    return Config().validate_instance()


class FakeExecutor(RuntimeExecutor):
    """Records every argument vector and answers with a canned output or error."""

    def __init__(self, output: str = "", error: str = None):
        self.output = output
        self.error = error
        self.calls: List[List[str]] = []

    async def execute(self, args: List[str]) -> str:
        self.calls.append(list(args))
        if self.error is not None:
            raise ExecutionError(self.error)
        return self.output


class FakeReader(ClusterStateReader):
    """Returns a fixed descriptor, or raises when built with an error message."""

    def __init__(self, descriptor: PodDescriptor = None, error: str = None):
        self.descriptor = descriptor
        self.error = error
        self.reads = []
        self.closed = False

    async def read_pod(self, name: str, namespace: str) -> PodDescriptor:
        self.reads.append((name, namespace))
        if self.error is not None:
            raise ClusterLookupError(self.error)
        return self.descriptor

    async def close(self):
        self.closed = True


@pytest.fixture
def fake_executor():
    return FakeExecutor(output="abc123\n")


@pytest.fixture
def web_pod():
    """A running pod with a 'web' container and a sidecar."""
    return PodDescriptor(
        name="web-7d4b9c",
        namespace="default",
        host_ip="10.0.0.12",
        pod_ip="172.17.0.5",
        phase="Running",
        container_statuses=[
            ContainerStatus(name="web", container_id="docker://abc123", image="nginx:1.25", ready=True),
            ContainerStatus(name="log-shipper", container_id="docker://def456", image="fluent-bit:2", ready=True),
        ],
    )


@pytest.fixture
def fake_reader(web_pod):
    return FakeReader(descriptor=web_pod)
