from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .text import quote_applescript

logger = logging.getLogger(__name__)

GENERIC_FAILURE = "AppleScript error"


class InvocationState(str, Enum):
    NOT_STARTED = "not_started"
    LAUNCHING = "launching"
    EXECUTING = "executing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureReason(str, Enum):
    LAUNCH = "launch"
    TIMEOUT = "timeout"
    NONZERO_EXIT = "nonzero-exit"


class AppleScriptError(RuntimeError):
    """Raised when ``osascript`` cannot be started, times out, or exits non-zero."""

    def __init__(
        self,
        message: str,
        *,
        reason: FailureReason,
        returncode: Optional[int] = None,
        invocation: Optional["Invocation"] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason
        self.returncode = returncode
        self.invocation = invocation


@dataclass
class Invocation:
    """Lifecycle of a single ``osascript`` call."""

    script: str
    state: InvocationState = InvocationState.NOT_STARTED
    history: List[InvocationState] = field(default_factory=list)
    stdout: str = ""
    failure: Optional[FailureReason] = None

    def advance(self, state: InvocationState) -> None:
        self.history.append(self.state)
        self.state = state
        logger.debug("osascript %s -> %s", self.history[-1].value, state.value)


def _text(stream: object) -> str:
    if stream is None:
        return ""
    if isinstance(stream, bytes):
        return stream.decode("utf-8", errors="replace")
    return str(stream)


@dataclass(frozen=True)
class AppleScriptRunner:
    """Runs AppleScript through ``osascript`` after making sure the application is up."""

    osascript_path: str = "osascript"
    application: str = "Calendar"
    timeout_seconds: float = 30.0
    launch_delay_seconds: float = 0.5

    def wrap(self, script: str) -> str:
        return f'''tell application {quote_applescript(self.application)}
    launch
end tell
delay {self.launch_delay_seconds}
{script}'''

    def run(self, script: str) -> str:
        """Execute ``script`` and return its stripped stdout.

        Raises:
            AppleScriptError: the process could not start, timed out, or exited non-zero.
        """

        invocation = Invocation(script=self.wrap(script))
        invocation.advance(InvocationState.LAUNCHING)
        try:
            process = subprocess.Popen(
                [self.osascript_path, "-e", invocation.script],
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
            )
        except OSError as exc:
            self._fail(invocation, FailureReason.LAUNCH)
            raise AppleScriptError(
                str(exc) or GENERIC_FAILURE,
                reason=FailureReason.LAUNCH,
                invocation=invocation,
            ) from exc

        invocation.advance(InvocationState.EXECUTING)
        try:
            stdout, stderr = process.communicate(timeout=self.timeout_seconds)
        except subprocess.TimeoutExpired as exc:
            process.kill()
            _, late_stderr = process.communicate()
            self._fail(invocation, FailureReason.TIMEOUT)
            message = _text(late_stderr).strip() or _text(exc.stderr).strip() or str(exc) or GENERIC_FAILURE
            raise AppleScriptError(message, reason=FailureReason.TIMEOUT, invocation=invocation) from exc

        if process.returncode != 0:
            self._fail(invocation, FailureReason.NONZERO_EXIT)
            message = _text(stderr).strip() or f"osascript exited with status {process.returncode}"
            raise AppleScriptError(
                message,
                reason=FailureReason.NONZERO_EXIT,
                returncode=process.returncode,
                invocation=invocation,
            )

        invocation.stdout = _text(stdout).strip()
        invocation.advance(InvocationState.SUCCEEDED)
        return invocation.stdout

    @staticmethod
    def _fail(invocation: Invocation, reason: FailureReason) -> None:
        invocation.failure = reason
        invocation.advance(InvocationState.FAILED)
        logger.warning("osascript failed (%s)", reason.value)
