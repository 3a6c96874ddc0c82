# Flagpick CLI — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ProcessSupervisor`, which runs an external command with a hard
wall-clock timeout.

Help acquisition has to survive programs that never print a help banner: tools
that start an interactive or animated display, or that block on input. Instead
of a blocking wait, the supervisor checks the child's state on a fixed cadence
and kills it once the deadline passes, so a call never outlives its timeout by
more than one poll interval.

Key Features:
- stdout and stderr are always captured, never inherited from the terminal
- Non-blocking liveness checks every `poll_interval` seconds (50 ms default)
- Forced termination and reaping on timeout
- Per-invocation environment overrides that never touch `os.environ`

Example:
    supervisor = ProcessSupervisor()
    text = await supervisor.run(["ls", "--help"], timeout=1.0, env={"COLUMNS": "500"})

Raises:
- `CommandTimeoutError`: The process was still running at the deadline.
- `CommandFailedError`: The process could not start or exited non-zero.
"""
from __future__ import annotations

import asyncio
import os
import time
from enum import Enum
from typing import Mapping, Sequence

from flagpick.exceptions import CommandFailedError, CommandTimeoutError
from flagpick.logger import logger

DEFAULT_POLL_INTERVAL = 0.05


class ProcessState(Enum):
    RUNNING = "running"
    EXITED_OK = "exited_ok"
    EXITED_ERR = "exited_err"


def poll_state(process: asyncio.subprocess.Process) -> ProcessState:
    """Non-blocking check of a child's state."""
    if process.returncode is None:
        return ProcessState.RUNNING
    if process.returncode == 0:
        return ProcessState.EXITED_OK
    return ProcessState.EXITED_ERR


def build_env(overrides: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy of the current environment with `overrides` layered on top."""
    return {**os.environ, **(overrides or {})}


class ProcessSupervisor:
    """
    Runs commands with captured output and a wall-clock timeout.

    Args:
        poll_interval (float): Seconds between liveness checks.
    """

    def __init__(self, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        if poll_interval <= 0:
            raise ValueError("poll_interval must be greater than 0")
        self.poll_interval = poll_interval

    async def run(
        self,
        command: Sequence[str],
        *,
        timeout: float,
        env: Mapping[str, str] | None = None,
    ) -> str:
        """Run `command` and return its stdout decoded as text."""
        command = list(command)
        started = time.monotonic()
        deadline = started + timeout
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=build_env(env),
            )
        except OSError as error:
            logger.debug("Could not start %s: %s", command, error)
            raise CommandFailedError(command, stderr=str(error)) from error

        logger.debug("Started %s (pid %s)", command, process.pid)
        assert process.stdout is not None and process.stderr is not None
        stdout_task = asyncio.create_task(process.stdout.read())
        stderr_task = asyncio.create_task(process.stderr.read())

        while True:
            state = poll_state(process)
            if state is not ProcessState.RUNNING:
                # A surviving grandchild can hold the pipes open past exit.
                _, pending = await asyncio.wait(
                    {stdout_task, stderr_task},
                    timeout=max(deadline - time.monotonic(), 0),
                )
                if pending:
                    await self._terminate(process, *pending)
                    raise CommandTimeoutError(command, timeout)
                stdout, stderr = stdout_task.result(), stderr_task.result()
                logger.debug(
                    "%s exited with %s after %.3fs",
                    command,
                    process.returncode,
                    time.monotonic() - started,
                )
                if state is ProcessState.EXITED_OK:
                    return stdout.decode("utf-8", errors="replace")
                raise CommandFailedError(
                    command,
                    process.returncode,
                    stderr.decode("utf-8", errors="replace"),
                )

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                await self._terminate(process, stdout_task, stderr_task)
                logger.debug("Killed %s after %.3fs timeout", command, timeout)
                raise CommandTimeoutError(command, timeout)

            await asyncio.sleep(min(self.poll_interval, remaining))

    async def _terminate(
        self,
        process: asyncio.subprocess.Process,
        *readers: asyncio.Task,
    ) -> None:
        try:
            process.kill()
        except ProcessLookupError:
            pass
        await process.wait()
        for reader in readers:
            reader.cancel()
        await asyncio.gather(*readers, return_exceptions=True)
