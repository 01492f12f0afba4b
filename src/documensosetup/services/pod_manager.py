"""Imperative pod management for engines without .pod Quadlet support."""

import re
from pathlib import Path
from typing import Callable, List

from documensosetup.errors import ProvisionerError
from documensosetup.errors_catalog import actionable_error
from documensosetup.models import FailurePolicy

PUBLISH_PORT_LINE = re.compile(r"^PublishPort=(.*)$")


def extract_publish_ports(pod_definition: str) -> List[str]:
    """Returns the PublishPort mappings of a pod definition in file order."""
    ports = []
    for line in pod_definition.splitlines():
        match = PUBLISH_PORT_LINE.match(line)
        if match:
            ports.append(match.group(1).strip())
    return ports


def publish_arguments(ports: List[str]) -> List[str]:
    args: List[str] = []
    for port in ports:
        args.extend(["--publish", port])
    return args


class PodManagerService:
    """Tears down and recreates the application pod with the engine CLI."""

    def __init__(
        self,
        logger,
        console,
        pod_name: str,
        fallback_publish: str,
        engine_command: str = "podman",
    ):
        self.logger = logger
        self.console = console
        self.pod_name = pod_name
        self.fallback_publish = fallback_publish
        self.engine_command = engine_command

    def resolve_publish_arguments(self, pod_file: Path) -> List[str]:
        if not pod_file.is_file():
            self.console.print(
                f"[yellow]Warning: Pod file {pod_file} not found, creating basic pod[/yellow]"
            )
            self.logger.debug("Falling back to publish mapping %s", self.fallback_publish)
            return publish_arguments([self.fallback_publish])

        return publish_arguments(extract_publish_ports(pod_file.read_text(encoding="utf-8")))

    def pod_exists(self, run_cmd: Callable) -> bool:
        result = run_cmd(
            [self.engine_command, "pod", "exists", self.pod_name],
            policy=FailurePolicy.IGNORABLE,
            capture_output=True,
        )
        return result.returncode == 0

    def teardown_pod(self, run_cmd: Callable):
        self.console.print(f"Cleaning up existing pod '{self.pod_name}'...")
        engine = self.engine_command

        # may already be stopped
        self._ignore_failure(run_cmd, [engine, "pod", "stop", self.pod_name])

        listing = self._ignore_failure(
            run_cmd,
            [engine, "ps", "-a", "--pod", "--filter", f"pod={self.pod_name}", "--format", "{{.ID}}"],
        )
        container_ids = [line.strip() for line in (listing.stdout or "").splitlines() if line.strip()]
        if listing.returncode == 0 and container_ids:
            self._ignore_failure(run_cmd, [engine, "rm", "-f", *container_ids])

        self._ignore_failure(run_cmd, [engine, "pod", "rm", "-f", self.pod_name])

        if self.pod_exists(run_cmd):
            raise ProvisionerError(actionable_error("pod_teardown_failed", pod_name=self.pod_name))

    def create_pod(self, publish_args: List[str], run_cmd: Callable):
        run_cmd(
            [self.engine_command, "pod", "create", "--name", self.pod_name, *publish_args],
            policy=FailurePolicy.FATAL,
        )
        ports = " ".join(publish_args) or "<none>"
        self.console.print(f"[green]Created pod '{self.pod_name}' with ports: {ports}[/green]")

    @staticmethod
    def _ignore_failure(run_cmd: Callable, cmd: List[str]):
        return run_cmd(cmd, policy=FailurePolicy.IGNORABLE, capture_output=True)

    def reconcile_pod(self, pod_file: Path, run_cmd: Callable) -> List[str]:
        """Leaves exactly one freshly created pod; returns the publish arguments used."""
        publish_args = self.resolve_publish_arguments(pod_file)

        if self.pod_exists(run_cmd):
            self.teardown_pod(run_cmd)

        self.create_pod(publish_args, run_cmd)
        return publish_args
