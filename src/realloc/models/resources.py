# src/realloc/models/resources.py
"""
Pydantic models for a single resize operation.

A ResizeRequest carries the raw, human-supplied value across the wire.
A ResourceCommand is the validated, normalized form the node agent turns
into a container runtime invocation. ResourceCommand instances only come
out of ResourceCommand.from_request, which either returns a complete
command or raises.
"""

from enum import Enum
from typing import Callable, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..core.exceptions import UnsupportedResourceError
from ..utils.units import burst_units, parse_bandwidth, parse_cpu, parse_memory

NETWORK_INTERFACE = "eth0"
SHAPING_LATENCY = "50ms"


class ResourceKind(str, Enum):
    """The resources that can be resized on a running container."""

    CPU = "cpu"
    MEMORY = "memory"
    BANDWIDTH = "bandwidth"

    @classmethod
    def from_value(cls, value: str) -> "ResourceKind":
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedResourceError(f"unsupported resource ({value})") from None


class ResizeRequest(BaseModel):
    """One resize operation as sent from the resolver to the node agent."""

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind = Field(..., description="The resource to resize.")
    raw_value: str = Field(..., description="The value as typed by the operator, e.g. '500m'.")
    container: str = Field(..., description="The runtime container id (not the pod name).")

    def to_query(self) -> Dict[str, str]:
        """Query parameters understood by the node agent."""
        return {"resource": self.kind.value, "value": self.raw_value, "container": self.container}


class ResourceCommand(BaseModel):
    """A parsed resize request, ready to be turned into runtime arguments."""

    model_config = ConfigDict(frozen=True)

    kind: ResourceKind
    value: int = Field(..., description="Normalized magnitude; shares for cpu, amount for memory and bandwidth.")
    units: str = Field("", description="Normalized unit; empty for cpu.")
    container: str

    @classmethod
    def from_request(cls, request: ResizeRequest) -> "ResourceCommand":
        value, units = _PARSERS[request.kind](request.raw_value)
        return cls(kind=request.kind, value=value, units=units, container=request.container)

    def args(self) -> List[str]:
        """The argument vector for the container runtime binary."""
        return _SYNTHESIZERS[self.kind](self)


def _cpu_args(cmd: ResourceCommand) -> List[str]:
    return ["update", cmd.container, f"--cpu-shares={cmd.value}"]


def _memory_args(cmd: ResourceCommand) -> List[str]:
    return ["update", cmd.container, f"--memory={cmd.value}{cmd.units}"]


def _bandwidth_args(cmd: ResourceCommand) -> List[str]:
    # burst keeps the rate's magnitude in the base unit: 10mbps -> burst 10m
    script = (
        f"tc qdisc add dev {NETWORK_INTERFACE} root tbf "
        f"rate {cmd.value}{cmd.units} latency {SHAPING_LATENCY} "
        f"burst {cmd.value}{burst_units(cmd.units)}"
    )
    return ["exec", cmd.container, "sh", "-c", script]


_PARSERS: Dict[ResourceKind, Callable[[str], Tuple[int, str]]] = {
    ResourceKind.CPU: parse_cpu,
    ResourceKind.MEMORY: parse_memory,
    ResourceKind.BANDWIDTH: parse_bandwidth,
}

_SYNTHESIZERS: Dict[ResourceKind, Callable[[ResourceCommand], List[str]]] = {
    ResourceKind.CPU: _cpu_args,
    ResourceKind.MEMORY: _memory_args,
    ResourceKind.BANDWIDTH: _bandwidth_args,
}


def parse_resource_command(resource: str, value: str, container: str) -> ResourceCommand:
    """Builds a ResourceCommand from the agent's raw query parameters."""
    request = ResizeRequest(kind=ResourceKind.from_value(resource), raw_value=value, container=container)
    return ResourceCommand.from_request(request)
