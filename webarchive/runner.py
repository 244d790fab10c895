from __future__ import annotations

import asyncio
import contextlib
import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from webarchive.models import CommandResult

logger = logging.getLogger(__name__)


class CommandRunner(ABC):
    """Runs an external tool and reports how it exited instead of raising."""

    @abstractmethod
    async def run(self, args: Sequence[str], timeout: float | None = None) -> CommandResult:
        raise NotImplementedError


class SubprocessRunner(CommandRunner):
    async def run(self, args: Sequence[str], timeout: float | None = None) -> CommandResult:
        logger.debug("exec: %s", " ".join(args))
        try:
            proc = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.STDOUT,
            )
        except OSError as exc:
            logger.error("Could not start %s: %s", args[0], exc)
            return CommandResult(returncode=None, output=str(exc))

        try:
            stdout, _ = await asyncio.wait_for(proc.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            # the child may exit on its own between the timeout and the kill
            with contextlib.suppress(ProcessLookupError):
                proc.kill()
            await proc.wait()
            logger.error("%s timed out after %ss", args[0], timeout)
            return CommandResult(returncode=None, output=f"timed out after {timeout}s")

        output = stdout.decode("utf-8", errors="replace") if stdout else ""
        return CommandResult(returncode=proc.returncode, output=output)
