"""Self-signed signing certificate provisioning."""

from pathlib import Path
from typing import Callable

from documensosetup.constants import CERT_TEMP_CRT_NAME, CERT_TEMP_KEY_NAME, FILE_MODE
from documensosetup.models import FailurePolicy, ProvisionerConfig


class CertificateService:
    """Creates a PKCS#12 bundle with openssl when none exists yet.

    Every openssl failure is downgraded to a warning: the operator is then
    expected to drop a real certificate at the bundle path.
    """

    def __init__(self, config: ProvisionerConfig, logger, console, filesystem_service):
        self.config = config
        self.logger = logger
        self.console = console
        self.filesystem_service = filesystem_service

    def ensure_certificate(self, volume_dir: Path, run_cmd: Callable) -> bool:
        """Returns True when a new bundle was written."""
        cert_path = volume_dir / self.config.cert_file_name
        self.console.print("[blue]Creating default signing certificate...[/blue]")

        created = False
        if cert_path.exists():
            self.logger.info("Certificate already present at %s, keeping it.", cert_path)
        else:
            created = self._generate(volume_dir, cert_path, run_cmd)

        if cert_path.exists():
            self.filesystem_service.set_permissions(cert_path, FILE_MODE)
        return created

    def _generate(self, volume_dir: Path, cert_path: Path, run_cmd: Callable) -> bool:
        key_path = volume_dir / CERT_TEMP_KEY_NAME
        crt_path = volume_dir / CERT_TEMP_CRT_NAME

        result = run_cmd(
            self.build_request_cmd(key_path, crt_path),
            policy=FailurePolicy.TOLERATED,
            capture_output=True,
        )
        if result.returncode != 0:
            self._warn("Could not create self-signed certificate. OpenSSL may not be available.")
            self._warn(f"You will need to provide a valid certificate at {cert_path}")

        if not (key_path.exists() and crt_path.exists()):
            return False

        try:
            result = run_cmd(
                self.build_export_cmd(key_path, crt_path, cert_path),
                policy=FailurePolicy.TOLERATED,
                capture_output=True,
            )
        finally:
            self.filesystem_service.remove_files([key_path, crt_path])

        if result.returncode != 0:
            self._warn("Could not create PKCS12 certificate.")
            return False

        self.console.print(
            "[green]Created self-signed certificate for testing "
            f"(password: {self.config.cert_passphrase})[/green]"
        )
        return True

    def build_request_cmd(self, key_path: Path, crt_path: Path):
        return [
            "openssl",
            "req",
            "-x509",
            "-newkey",
            f"rsa:{self.config.cert_key_bits}",
            "-keyout",
            str(key_path),
            "-out",
            str(crt_path),
            "-days",
            str(self.config.cert_days),
            "-nodes",
            "-subj",
            self.config.cert_subject,
        ]

    def build_export_cmd(self, key_path: Path, crt_path: Path, cert_path: Path):
        return [
            "openssl",
            "pkcs12",
            "-export",
            "-out",
            str(cert_path),
            "-inkey",
            str(key_path),
            "-in",
            str(crt_path),
            "-passout",
            f"pass:{self.config.cert_passphrase}",
        ]

    def _warn(self, message: str):
        self.console.print(f"[yellow]Warning: {message}[/yellow]")
        self.logger.debug(message)
