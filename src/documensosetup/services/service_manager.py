"""User service manager (systemd --user) integration."""

from typing import Callable

from documensosetup.models import FailurePolicy


class ServiceManagerService:
    """Reloads unit definitions and starts the generated service."""

    def __init__(self, logger, console, systemctl: str = "systemctl"):
        self.logger = logger
        self.console = console
        self.systemctl = systemctl

    def reload(self, run_cmd: Callable):
        self.logger.info("Reloading user service manager...")
        run_cmd([self.systemctl, "--user", "daemon-reload"], policy=FailurePolicy.FATAL)
        self.console.print("[green]Quadlet files created successfully.[/green]")

    def start(self, service_name: str, run_cmd: Callable):
        # Quadlet-generated services cannot be enabled, only started.
        self.console.print(f"[blue]Starting {service_name}...[/blue]")
        run_cmd([self.systemctl, "--user", "start", service_name], policy=FailurePolicy.FATAL)

    def reload_and_start(self, service_name: str, run_cmd: Callable):
        self.reload(run_cmd)
        self.start(service_name, run_cmd)
