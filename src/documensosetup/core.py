import logging
import subprocess
from typing import List, Optional

from rich.console import Console

from .constants import CERT_VOLUME_PLACEHOLDER, ENV_FILE_PLACEHOLDER
from .errors import ProvisionerError
from .models import EngineCapability, FailurePolicy, ProvisionerConfig
from .services.certificate import CertificateService
from .services.command_runner import CommandRunner
from .services.engine import EngineService
from .services.filesystem import FileSystemService
from .services.pod_manager import PodManagerService
from .services.preflight import PreflightService
from .services.service_manager import ServiceManagerService
from .services.unit_installer import UnitInstallerService
from .services.unit_templates import UnitTemplateRenderer

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger("documensosetup")

INTERRUPTED_EXIT_CODE = 130


class Provisioner:
    """Runs the Documenso setup steps in order, stopping at the first fatal error."""

    def __init__(self, config: Optional[ProvisionerConfig] = None):
        self.config = config or ProvisionerConfig()
        self.capability: Optional[EngineCapability] = None

        self.command_runner = CommandRunner(logger=logger, subprocess_module=subprocess)
        self.filesystem_service = FileSystemService(logger=logger, console=console)
        self.preflight_service = PreflightService(logger=logger, console=console)
        self.certificate_service = CertificateService(
            config=self.config,
            logger=logger,
            console=console,
            filesystem_service=self.filesystem_service,
        )
        self.engine_service = EngineService(
            logger=logger,
            console=console,
            engine_command=self.config.engine_command,
            pod_units_min_major=self.config.pod_units_min_major,
        )
        self.pod_manager_service = PodManagerService(
            logger=logger,
            console=console,
            pod_name=self.config.pod_name,
            fallback_publish=self.config.fallback_publish,
            engine_command=self.config.engine_command,
        )
        self.unit_installer_service = UnitInstallerService(
            logger=logger,
            console=console,
            filesystem_service=self.filesystem_service,
            renderer=UnitTemplateRenderer(logger=logger),
        )
        self.service_manager_service = ServiceManagerService(logger=logger, console=console)

    def _run_cmd(
        self,
        cmd: List[str],
        policy: FailurePolicy = FailurePolicy.FATAL,
        capture_output: bool = False,
    ) -> subprocess.CompletedProcess:
        return self.command_runner.run(cmd, policy=policy, capture_output=capture_output)

    def check_preflight(self):
        self.preflight_service.check_volume_dir(self.config.volume_dir)

    def ensure_certificate(self) -> bool:
        return self.certificate_service.ensure_certificate(self.config.volume_dir, self._run_cmd)

    def detect_engine_capability(self) -> EngineCapability:
        self.capability = self.engine_service.detect_capability(self._run_cmd)
        return self.capability

    def reconcile_pod(self) -> List[str]:
        return self.pod_manager_service.reconcile_pod(self.config.pod_file, self._run_cmd)

    def install_units(self):
        substitutions = {
            ENV_FILE_PLACEHOLDER: str(self.config.env_file),
            CERT_VOLUME_PLACEHOLDER: self.config.cert_volume,
        }
        return self.unit_installer_service.install_units(
            dest_dir=self.config.unit_dir,
            pod_file=self.config.pod_file,
            container_file=self.config.container_file,
            substitutions=substitutions,
        )

    def reload_and_start(self):
        self.service_manager_service.reload_and_start(self.config.service_name, self._run_cmd)

    def print_summary(self):
        console.print("\n[bold green]=== Documenso Setup Complete ===[/bold green]")
        console.print("Documenso services have been started.")
        console.print(f"Access Documenso at: {self.config.access_url}")
        console.print("\n[bold]=== IMPORTANT SETUP NOTES ===[/bold]")
        console.print("1. Documenso requires a PostgreSQL database connection")
        console.print(f"2. Update database settings in {self.config.env_file}")
        console.print("3. Configure SMTP settings for email functionality")
        console.print("4. Replace the test certificate with a proper signing certificate")
        console.print("5. Update NEXTAUTH_SECRET and encryption keys for security")

    def run(self) -> int:
        try:
            console.print("[bold blue]=== Setting up Documenso with Podman ===[/bold blue]")
            logger.info("Starting Documenso setup...")

            self.check_preflight()
            self.ensure_certificate()

            capability = self.detect_engine_capability()
            if not capability.supports_pod_units:
                self.reconcile_pod()

            self.install_units()
            self.reload_and_start()

            self.print_summary()
            return 0

        except KeyboardInterrupt:
            err_console.print("[bold red]Operation cancelled by user.[/bold red]")
            logger.info("Operation cancelled by user")
            return INTERRUPTED_EXIT_CODE
        except ProvisionerError as exc:
            err_console.print(f"[bold red]Error:[/bold red] {exc}")
            logger.error(str(exc))
            return exc.exit_code
        except Exception as exc:
            err_console.print(f"[bold red]Unexpected error:[/bold red] {exc}")
            logger.exception("Unexpected error")
            return 1
