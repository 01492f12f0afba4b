"""Container engine version detection."""

import re
from typing import Callable

from packaging import version

from documensosetup.errors import ProvisionerError
from documensosetup.errors_catalog import actionable_error
from documensosetup.models import EngineCapability, FailurePolicy

VERSION_TOKEN = re.compile(r"(\d+)\.(\d+)")


def parse_engine_version(
    raw: str,
    pod_units_min_major: int,
    command: str = "podman",
) -> EngineCapability:
    """Extracts the first major.minor token from a ``--version`` banner."""
    match = VERSION_TOKEN.search(raw or "")
    if not match:
        raise ProvisionerError(
            actionable_error(
                "engine_version_unparsable",
                command=command,
                output=(raw or "").strip(),
            )
        )

    parsed = version.parse(f"{match.group(1)}.{match.group(2)}")
    return EngineCapability(
        raw=raw.strip(),
        major=parsed.major,
        minor=parsed.minor,
        supports_pod_units=parsed.major >= pod_units_min_major,
    )


class EngineService:
    """Decides whether the engine can materialize pods from Quadlet files."""

    def __init__(
        self,
        logger,
        console,
        engine_command: str = "podman",
        pod_units_min_major: int = 5,
    ):
        self.logger = logger
        self.console = console
        self.engine_command = engine_command
        self.pod_units_min_major = pod_units_min_major

    def detect_capability(self, run_cmd: Callable) -> EngineCapability:
        result = run_cmd(
            [self.engine_command, "--version"],
            policy=FailurePolicy.FATAL,
            capture_output=True,
        )
        capability = parse_engine_version(
            result.stdout or "",
            self.pod_units_min_major,
            command=self.engine_command,
        )
        self.logger.debug("Detected %s %s", self.engine_command, capability.version)

        if capability.supports_pod_units:
            self.console.print(
                f"[blue]Podman {capability.short_version} supports .pod Quadlets - "
                "systemd will handle pod creation...[/blue]"
            )
        else:
            self.console.print(
                f"[yellow]Podman {capability.short_version} detected - .pod Quadlets not supported, "
                "creating pod manually...[/yellow]"
            )
        return capability
