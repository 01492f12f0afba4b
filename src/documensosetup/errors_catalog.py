"""Actionable error catalog for documenso-setup."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "volume_dir_missing": {
        "what": "Volume directory {path} does not exist or is not accessible.",
        "next": "Create it with the right ownership (normally done by services.sh) and rerun.",
    },
    "pod_teardown_failed": {
        "what": "Failed to remove existing pod '{pod_name}'.",
        "next": "Inspect it with `podman pod ps` and remove it manually before retrying.",
    },
    "engine_version_unparsable": {
        "what": "Could not read a version number from `{command} --version` output: {output!r}",
        "next": "Check that `{command}` is a working Podman installation.",
    },
    "unit_template_missing": {
        "what": "Unit template not found: {path}",
        "next": "Run the setup from the directory that holds the Documenso Quadlet files or set `base_dir`.",
    },
    "unit_placeholder_left": {
        "what": "Unresolved placeholders remain in {path}: {tokens}",
        "next": "Remove or fill in the unknown placeholders in the template.",
    },
    "command_failed": {
        "what": "Command failed ({returncode}): {command}",
        "next": "Fix the reported problem and rerun the setup; completed steps are safe to repeat.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
