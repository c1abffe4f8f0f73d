# Copyright (c) 2025 CoReason, Inc.
#
# This software is proprietary and dual-licensed.
# Licensed under the Prosperity Public License 3.0 (the "License").
# A copy of the license is available at https://prosperitylicense.com/versions/3.0.0
# For details, see the LICENSE file.
# Commercial use beyond a 30-day trial requires a separate license.
#
# Source Code: https://github.com/CoReason-AI/coreason_agent_tools

import asyncio
import os
import signal
import sys

from coreason_agent_tools.models import Completed, ExecutionOutcome, LaunchFailed, TimedOut
from coreason_agent_tools.runtime.base import CodeRuntime
from coreason_agent_tools.utils.logger import logger
from coreason_agent_tools.utils.text import decode_and_truncate

_CHUNK_SIZE = 64 * 1024
_POSIX = sys.platform != "win32"


class ProcessLauncher(CodeRuntime):
    """
    Runs code as `<interpreter> -c <code>` in a fresh child process.

    There is no isolation: the child runs with the host user's privileges.
    """

    def __init__(
        self,
        interpreter: str = "python",
        timeout: float = 10.0,
        max_output_bytes: int = 1024 * 1024,
    ):
        self.interpreter = interpreter
        self.timeout = timeout
        self.max_output_bytes = max_output_bytes

    async def run(self, code: str) -> ExecutionOutcome:
        """
        Execute the code and wait for exit or deadline, whichever comes first.
        """
        try:
            proc = await asyncio.create_subprocess_exec(
                self.interpreter,
                "-c",
                code,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                # Own process group so the whole tree can be killed on timeout
                start_new_session=_POSIX,
            )
        except OSError as e:
            reason = e.strerror or str(e)
            logger.error(f"Failed to launch {self.interpreter}: {reason}")
            return LaunchFailed(reason=reason)
        except ValueError as e:
            # e.g. embedded null byte in the argument vector
            logger.error(f"Failed to launch {self.interpreter}: {e}")
            return LaunchFailed(reason=str(e))

        logger.debug(f"Started {self.interpreter} (pid {proc.pid})")

        try:
            try:
                (stdout_bytes, stdout_dropped), (stderr_bytes, stderr_dropped), exit_code = await asyncio.wait_for(
                    asyncio.gather(
                        self._drain(proc.stdout),
                        self._drain(proc.stderr),
                        proc.wait(),
                    ),
                    timeout=self.timeout,
                )
            except asyncio.TimeoutError:
                logger.warning(f"Execution timed out ({self.timeout}s). Killing pid {proc.pid}.")
                return TimedOut(timeout=self.timeout)

            stdout, stdout_truncated = decode_and_truncate(stdout_bytes, stdout_dropped)
            stderr, stderr_truncated = decode_and_truncate(stderr_bytes, stderr_dropped)
            if stdout_truncated or stderr_truncated:
                logger.warning(
                    f"Output truncated to {self.max_output_bytes} bytes "
                    f"(stdout dropped {stdout_dropped}, stderr dropped {stderr_dropped})"
                )

            return Completed(
                stdout=stdout,
                stderr=stderr,
                exit_code=exit_code,
                truncated=stdout_truncated or stderr_truncated,
            )
        finally:
            await self._reap(proc)

    async def _drain(self, stream: asyncio.StreamReader | None) -> tuple[bytes, int]:
        """
        Read a stream to EOF, keeping at most `max_output_bytes`.
        Returns the kept bytes and the number of bytes discarded.
        """
        if stream is None:
            return b"", 0

        kept = bytearray()
        dropped = 0
        while True:
            chunk = await stream.read(_CHUNK_SIZE)
            if not chunk:
                break
            room = self.max_output_bytes - len(kept)
            if room > 0:
                kept.extend(chunk[:room])
                dropped += max(len(chunk) - room, 0)
            else:
                dropped += len(chunk)
        return bytes(kept), dropped

    async def _reap(self, proc: asyncio.subprocess.Process) -> None:
        """Kill the process group on POSIX (even after a normal exit), then wait for the leader.

        Background processes the program left behind share the group, so they die with it.
        """
        try:
            if _POSIX:
                os.killpg(proc.pid, signal.SIGKILL)
            elif proc.returncode is None:  # pragma: no cover
                proc.kill()
        except (ProcessLookupError, PermissionError):
            # Group already empty, or only a zombie leader is left
            pass
        await proc.wait()
