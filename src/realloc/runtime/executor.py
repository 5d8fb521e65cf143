# src/realloc/runtime/executor.py
"""
Runtime-command executors used by the node agent.

The agent only depends on the RuntimeExecutor interface so tests (or another
container runtime) can replace the docker CLI implementation.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from typing import List

from ..core.config import Config
from ..core.exceptions import ExecutionError
from ..utils.process import run_command

logger = logging.getLogger(__name__)


class RuntimeExecutor(ABC):
    """
    Abstract Base Class for anything that can run a container runtime command.
    """

    @abstractmethod
    async def execute(self, args: List[str]) -> str:
        """
        Runs the runtime with the given arguments and returns its standard output.

        Raises:
            ExecutionError: If the command could not be started or did not succeed.
        """
        pass


class CliRuntimeExecutor(RuntimeExecutor):
    """Runs a container runtime CLI (docker by default) as a subprocess."""

    def __init__(self, binary: str = "docker", timeout: float = 30.0):
        self.binary = binary
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> "CliRuntimeExecutor":
        return cls(binary=config.RUNTIME_BINARY, timeout=config.RUNTIME_TIMEOUT)

    async def execute(self, args: List[str]) -> str:
        argv = [self.binary] + list(args)
        try:
            result = await run_command(argv, timeout=self.timeout)
        except FileNotFoundError:
            raise ExecutionError(f"runtime binary not found: {self.binary}") from None
        except asyncio.TimeoutError:
            raise ExecutionError(f"runtime command timed out after {self.timeout:g}s") from None
        except OSError as e:
            raise ExecutionError(f"failed to start runtime command: {e}") from e

        if not result.ok:
            raise ExecutionError(result.error_text())

        return result.stdout
