"""Placeholder rendering for Quadlet unit templates."""

import re
from typing import Dict, FrozenSet, Iterable

from documensosetup.constants import CERT_VOLUME_PLACEHOLDER, ENV_FILE_PLACEHOLDER
from documensosetup.errors import ProvisionerError
from documensosetup.errors_catalog import actionable_error

PLACEHOLDER_TOKEN = re.compile(r"\b[A-Z][A-Z0-9_]*_PLACEHOLDER\b")


class UnitTemplateRenderer:
    """Replaces a fixed set of placeholder tokens in unit file text."""

    def __init__(
        self,
        logger,
        placeholders: Iterable[str] = (ENV_FILE_PLACEHOLDER, CERT_VOLUME_PLACEHOLDER),
    ):
        self.logger = logger
        self.placeholders: FrozenSet[str] = frozenset(placeholders)

    def validate_substitutions(self, substitutions: Dict[str, str]):
        missing = sorted(self.placeholders - set(substitutions))
        unknown = sorted(set(substitutions) - self.placeholders)
        if missing:
            raise ProvisionerError(f"Missing values for placeholders: {', '.join(missing)}")
        if unknown:
            raise ProvisionerError(f"Unknown placeholders: {', '.join(unknown)}")

    def render(self, template: str, substitutions: Dict[str, str], source: str = "<template>") -> str:
        self.validate_substitutions(substitutions)

        rendered = template
        for token in sorted(self.placeholders):
            if token not in rendered:
                self.logger.warning("Placeholder %s not found in %s", token, source)
                continue
            rendered = rendered.replace(token, substitutions[token])

        leftover = sorted(set(PLACEHOLDER_TOKEN.findall(rendered)))
        if leftover:
            raise ProvisionerError(
                actionable_error("unit_placeholder_left", path=source, tokens=", ".join(leftover))
            )
        return rendered
