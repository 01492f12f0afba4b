"""Domain errors for documenso-setup."""

from typing import List, Optional


class ProvisionerError(RuntimeError):
    """Raised when the setup cannot continue safely."""

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


def exit_status(returncode: Optional[int]) -> int:
    """Maps a child return code to a process exit status, shell style."""
    if not returncode:
        return 1
    if returncode < 0:
        # killed by signal N
        return 128 - returncode
    return returncode


class CommandFailedError(ProvisionerError):
    """Raised when a required external command exits with a non-zero status."""

    def __init__(self, message: str, cmd: List[str], returncode: Optional[int]):
        super().__init__(message, exit_code=exit_status(returncode))
        self.cmd = cmd
        self.returncode = returncode
