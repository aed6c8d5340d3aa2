"""Library for issuing commands using asyncio and returning the result.

Used for archiver backends that delegate to an external program, e.g. `tar`.
"""

import asyncio
import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

from .exceptions import CommandException

_LOGGER = logging.getLogger(__name__)

_TIMEOUT = 60.0


# No public API
__all__: list[str] = []


@dataclass
class Command:
    """An instance of a command to run."""

    cmd: list[str]
    """Array of command line arguments."""

    cwd: Path | None = None
    """Current working directory."""

    exc: type[CommandException] = CommandException
    """Exception to throw in case of an error."""

    timeout: float | None = _TIMEOUT
    """Seconds to wait for the command, or None to wait until it exits."""

    @property
    def string(self) -> str:
        """Render the command as a single string."""
        return " ".join([shlex.quote(arg) for arg in self.cmd])

    def __str__(self) -> str:
        """Render as a debug string."""
        if self.cwd:
            return f"({self.cwd}) {self.string}"
        return self.string

    async def _exec(self) -> bytes:
        _LOGGER.debug("Running command: %s", self)
        proc = await asyncio.create_subprocess_exec(
            *self.cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            cwd=self.cwd,
        )
        try:
            out, err = await proc.communicate()
        except asyncio.CancelledError:
            proc.kill()
            raise
        if proc.returncode:
            errors = [f"Command '{self}' failed with return code {proc.returncode}"]
            if out:
                errors.append(out.decode("utf-8", errors="replace"))
            if err:
                errors.append(err.decode("utf-8", errors="replace"))
            _LOGGER.debug("\n".join(errors))
            raise self.exc("\n".join(errors))
        return out

    async def run(self) -> bytes:
        """Run the command, returning stdout."""
        try:
            return await asyncio.wait_for(self._exec(), self.timeout)
        except asyncio.TimeoutError as err:
            raise self.exc(f"Command '{self}' timed out") from err


async def run(cmd: Command) -> str:
    """Run the specified command and return stdout."""
    out = await cmd.run()
    return out.decode("utf-8")
