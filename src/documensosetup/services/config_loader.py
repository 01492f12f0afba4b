"""Configuration loader for documenso-setup."""

import dataclasses
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from documensosetup.errors import ProvisionerError
from documensosetup.models import ProvisionerConfig

PATH_KEYS = {"base_dir", "volume_dir", "unit_dir"}
INT_KEYS = {"cert_days", "cert_key_bits", "pod_units_min_major"}


class ConfigLoader:
    """Loads YAML configuration files that override setup defaults."""

    SUPPORTED_KEYS = {f.name for f in dataclasses.fields(ProvisionerConfig)} | {
        "verbose",
        "log_file",
    }

    def load(self, config_path: Optional[str]) -> Dict[str, Any]:
        if not config_path:
            return {}

        path = Path(config_path)
        if not path.exists():
            raise ProvisionerError(f"Config file not found: {config_path}")

        try:
            parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as exc:
            raise ProvisionerError(f"Invalid config file '{config_path}': {exc}") from exc

        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise ProvisionerError("Config file must contain a YAML mapping at the root.")

        unknown = sorted(set(parsed.keys()) - self.SUPPORTED_KEYS)
        if unknown:
            unknown_list = ", ".join(unknown)
            raise ProvisionerError(f"Unknown configuration keys: {unknown_list}")

        return parsed


def build_config(values: Dict[str, Any]) -> ProvisionerConfig:
    """Builds a ProvisionerConfig from loaded values, ignoring CLI-only keys."""
    field_names = {f.name for f in dataclasses.fields(ProvisionerConfig)}
    kwargs: Dict[str, Any] = {}

    for key, value in values.items():
        if key not in field_names or value is None:
            continue
        if key in PATH_KEYS:
            kwargs[key] = Path(str(value)).expanduser()
        elif key in INT_KEYS:
            try:
                kwargs[key] = int(value)
            except (TypeError, ValueError) as exc:
                raise ProvisionerError(f"Configuration key '{key}' must be an integer.") from exc
        else:
            if isinstance(value, (dict, list)):
                raise ProvisionerError(f"Configuration key '{key}' must be a string.")
            kwargs[key] = str(value)

    return ProvisionerConfig(**kwargs)
