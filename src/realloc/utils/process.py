# src/realloc/utils/process.py

import asyncio
import logging
from typing import List, NamedTuple

logger = logging.getLogger(__name__)


class ProcessResult(NamedTuple):
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_text(self) -> str:
        """Best description of a failed run: stderr, else stdout, else the exit status."""
        return self.stderr.strip() or self.stdout.strip() or f"exit status {self.returncode}"


async def run_command(argv: List[str], timeout: float) -> ProcessResult:
    """
    Runs a command without a shell and waits for it to finish.

    Raises:
        FileNotFoundError: If the executable does not exist.
        asyncio.TimeoutError: If the command runs longer than ``timeout`` seconds.
            The process is killed before the error propagates.
    """
    logger.debug("Running: %s", " ".join(argv))

    process = await asyncio.create_subprocess_exec(
        *argv,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        raise

    return ProcessResult(
        returncode=process.returncode,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )
