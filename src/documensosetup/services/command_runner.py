"""Subprocess execution service for documenso-setup."""

import subprocess
from typing import List

from documensosetup.errors import CommandFailedError, ProvisionerError
from documensosetup.errors_catalog import actionable_error
from documensosetup.models import FailurePolicy

NOT_FOUND_RETURNCODE = 127


class CommandRunner:
    """Runs external commands and classifies failures per call site."""

    def __init__(self, logger, subprocess_module=subprocess):
        self.logger = logger
        self.subprocess = subprocess_module

    def run(
        self,
        cmd: List[str],
        policy: FailurePolicy = FailurePolicy.FATAL,
        capture_output: bool = False,
    ) -> subprocess.CompletedProcess:
        cmd_str = " ".join(cmd)
        self.logger.debug("Executing: %s", cmd_str)

        try:
            result = self.subprocess.run(cmd, text=True, capture_output=capture_output)
        except FileNotFoundError as exc:
            if policy is FailurePolicy.FATAL:
                raise CommandFailedError(
                    f"Required command not found: {cmd[0]}. Please install it and try again.",
                    cmd=cmd,
                    returncode=None,
                ) from exc
            self._report(policy, f"Command not found: {cmd[0]}")
            return subprocess.CompletedProcess(
                cmd, NOT_FOUND_RETURNCODE, stdout="", stderr=f"{cmd[0]}: not found"
            )
        except OSError as exc:
            raise ProvisionerError(f"Failed to execute command: {cmd_str}. {exc}") from exc

        if capture_output and result.stdout:
            self.logger.debug("Command output: %s", result.stdout.strip())

        if result.returncode == 0:
            return result

        message = actionable_error(
            "command_failed", returncode=str(result.returncode), command=cmd_str
        )
        stderr = (result.stderr or "").strip() if capture_output else ""
        if stderr:
            message = f"{message}\n{stderr}"

        if policy is FailurePolicy.FATAL:
            raise CommandFailedError(message, cmd=cmd, returncode=result.returncode)

        self._report(policy, f"Command failed ({result.returncode}): {cmd_str}")
        return result

    def _report(self, policy: FailurePolicy, message: str):
        if policy is FailurePolicy.TOLERATED:
            self.logger.warning(message)
        else:
            self.logger.debug("Ignored: %s", message)
