"""Shared domain models for documenso-setup."""

import enum
import os
from dataclasses import dataclass, field
from pathlib import Path

from packaging.version import Version

from . import constants


class FailurePolicy(enum.Enum):
    """How a non-zero exit of an external command is treated."""

    FATAL = "fatal"
    TOLERATED = "tolerated"
    IGNORABLE = "ignorable"


def default_unit_dir() -> Path:
    config_home = os.environ.get("XDG_CONFIG_HOME") or os.path.join(
        os.path.expanduser("~"), ".config"
    )
    return Path(config_home) / "containers" / "systemd"


@dataclass(frozen=True)
class ProvisionerConfig:
    """Names and paths used by a single setup run."""

    base_dir: Path = field(default_factory=Path.cwd)
    volume_dir: Path = Path(constants.DEFAULT_VOLUME_DIR)
    unit_dir: Path = field(default_factory=default_unit_dir)
    pod_name: str = constants.DEFAULT_POD_NAME
    service_name: str = constants.DEFAULT_SERVICE_NAME
    pod_file_name: str = constants.POD_FILE_NAME
    container_file_name: str = constants.CONTAINER_FILE_NAME
    env_file_name: str = constants.ENV_FILE_NAME
    fallback_publish: str = constants.DEFAULT_FALLBACK_PUBLISH
    cert_file_name: str = constants.CERT_FILE_NAME
    cert_passphrase: str = constants.CERT_PASSPHRASE
    cert_subject: str = constants.CERT_SUBJECT
    cert_days: int = constants.CERT_DAYS
    cert_key_bits: int = constants.CERT_KEY_BITS
    cert_container_path: str = constants.CERT_CONTAINER_PATH
    engine_command: str = constants.ENGINE_COMMAND
    pod_units_min_major: int = constants.POD_UNITS_MIN_MAJOR
    access_url: str = constants.DEFAULT_ACCESS_URL

    @property
    def pod_file(self) -> Path:
        return self.base_dir / self.pod_file_name

    @property
    def container_file(self) -> Path:
        return self.base_dir / self.container_file_name

    @property
    def env_file(self) -> Path:
        return self.base_dir.resolve() / self.env_file_name

    @property
    def cert_file(self) -> Path:
        return self.volume_dir / self.cert_file_name

    @property
    def cert_volume(self) -> str:
        return f"{self.cert_file}:{self.cert_container_path}:ro"


@dataclass(frozen=True)
class EngineCapability:
    """Parsed container engine version and what it supports."""

    raw: str
    major: int
    minor: int
    supports_pod_units: bool

    @property
    def version(self) -> Version:
        return Version(f"{self.major}.{self.minor}")

    @property
    def short_version(self) -> str:
        return f"{self.major}.{self.minor}"
