"""Preflight checks run before any side effect."""

from pathlib import Path

from documensosetup.errors import ProvisionerError
from documensosetup.errors_catalog import actionable_error


class PreflightService:
    """Verifies externally provisioned prerequisites."""

    def __init__(self, logger, console):
        self.logger = logger
        self.console = console

    def check_volume_dir(self, volume_dir: Path):
        self.console.print(f"Using volume directory: {volume_dir}")
        if not volume_dir.is_dir():
            raise ProvisionerError(actionable_error("volume_dir_missing", path=str(volume_dir)))
        self.logger.debug("Volume directory %s is present", volume_dir)
