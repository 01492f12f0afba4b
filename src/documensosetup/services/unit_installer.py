"""Installs Quadlet unit files into the user's systemd directory."""

import shutil
from pathlib import Path
from typing import Dict, List

from documensosetup.constants import DIR_MODE, FILE_MODE, UNIT_FILE_PATTERNS
from documensosetup.errors import ProvisionerError
from documensosetup.errors_catalog import actionable_error


class UnitInstallerService:
    """Copies pod/container definitions, resolving container placeholders.

    Installed files are overwritten on every run.
    """

    def __init__(self, logger, console, filesystem_service, renderer):
        self.logger = logger
        self.console = console
        self.filesystem_service = filesystem_service
        self.renderer = renderer

    def install_units(
        self,
        dest_dir: Path,
        pod_file: Path,
        container_file: Path,
        substitutions: Dict[str, str],
    ) -> List[Path]:
        self.console.print("[blue]Creating Quadlet files...[/blue]")
        for template in (pod_file, container_file):
            if not template.is_file():
                raise ProvisionerError(actionable_error("unit_template_missing", path=str(template)))

        # render first so a bad template leaves the installed pair untouched
        rendered = self.renderer.render(
            container_file.read_text(encoding="utf-8"),
            substitutions,
            source=str(container_file),
        )

        self.filesystem_service.ensure_dir(dest_dir, DIR_MODE)

        pod_dest = dest_dir / pod_file.name
        shutil.copyfile(pod_file, pod_dest)
        self.logger.debug("Installed %s", pod_dest)

        container_dest = dest_dir / container_file.name
        container_dest.write_text(rendered, encoding="utf-8")
        self.logger.debug("Installed %s", container_dest)

        # systemd generators must be able to read every unit file
        self.filesystem_service.set_matching_permissions(dest_dir, UNIT_FILE_PATTERNS, FILE_MODE)
        return [pod_dest, container_dest]
