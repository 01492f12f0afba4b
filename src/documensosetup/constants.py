"""Shared constants for documenso-setup."""

DIR_MODE = 0o755
FILE_MODE = 0o644

DEFAULT_VOLUME_DIR = "/srv/documenso"
DEFAULT_POD_NAME = "documenso-pod"
DEFAULT_SERVICE_NAME = "documenso.service"
DEFAULT_FALLBACK_PUBLISH = "8084:3000"
DEFAULT_ACCESS_URL = "http://localhost:8084"

POD_FILE_NAME = "documenso.pod"
CONTAINER_FILE_NAME = "documenso.container"
ENV_FILE_NAME = "documenso.env"

CERT_FILE_NAME = "cert.p12"
CERT_PASSPHRASE = "documenso"
CERT_SUBJECT = "/CN=documenso.local/O=Documenso/C=US"
CERT_DAYS = 365
CERT_KEY_BITS = 2048
CERT_CONTAINER_PATH = "/opt/documenso/cert.p12"
CERT_TEMP_KEY_NAME = "temp.key"
CERT_TEMP_CRT_NAME = "temp.crt"

ENGINE_COMMAND = "podman"
POD_UNITS_MIN_MAJOR = 5

ENV_FILE_PLACEHOLDER = "ENV_FILE_PLACEHOLDER"
CERT_VOLUME_PLACEHOLDER = "CERT_VOLUME_PLACEHOLDER"
UNIT_FILE_PATTERNS = ("*.pod", "*.container")
