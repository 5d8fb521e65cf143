from .agent_client import AgentClient
from .resolver import ResizeValues, ResolvedTarget, Resolver

__all__ = ["AgentClient", "ResizeValues", "ResolvedTarget", "Resolver"]
