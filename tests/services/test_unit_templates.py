import pytest

from documensosetup.errors import ProvisionerError
from documensosetup.services.unit_templates import UnitTemplateRenderer

CONTAINER_TEMPLATE = """[Container]
Image=docker.io/documenso/documenso:latest
Pod=documenso.pod
EnvironmentFile=ENV_FILE_PLACEHOLDER
Volume=CERT_VOLUME_PLACEHOLDER
"""

SUBSTITUTIONS = {
    "ENV_FILE_PLACEHOLDER": "/opt/podman/documenso.env",
    "CERT_VOLUME_PLACEHOLDER": "/srv/documenso/cert.p12:/opt/documenso/cert.p12:ro",
}


def test_render_replaces_both_placeholders(logger):
    rendered = UnitTemplateRenderer(logger=logger).render(CONTAINER_TEMPLATE, SUBSTITUTIONS)

    assert "PLACEHOLDER" not in rendered
    assert "EnvironmentFile=/opt/podman/documenso.env\n" in rendered
    assert "Volume=/srv/documenso/cert.p12:/opt/documenso/cert.p12:ro\n" in rendered


def test_render_requires_every_schema_key(logger):
    with pytest.raises(ProvisionerError, match="Missing values for placeholders"):
        UnitTemplateRenderer(logger=logger).render(
            CONTAINER_TEMPLATE,
            {"ENV_FILE_PLACEHOLDER": "/opt/podman/documenso.env"},
        )


def test_render_rejects_unknown_keys(logger):
    substitutions = dict(SUBSTITUTIONS, DB_PLACEHOLDER="postgres")

    with pytest.raises(ProvisionerError, match="Unknown placeholders"):
        UnitTemplateRenderer(logger=logger).render(CONTAINER_TEMPLATE, substitutions)


def test_render_warns_when_template_lacks_a_placeholder(logger):
    template = CONTAINER_TEMPLATE.replace("Volume=CERT_VOLUME_PLACEHOLDER\n", "")

    rendered = UnitTemplateRenderer(logger=logger).render(template, SUBSTITUTIONS)

    assert "Volume=" not in rendered
    assert any("CERT_VOLUME_PLACEHOLDER" in warning for warning in logger.warnings)


def test_render_fails_on_leftover_tokens(logger):
    template = CONTAINER_TEMPLATE + "Secret=SECRET_PLACEHOLDER\n"

    with pytest.raises(ProvisionerError, match="SECRET_PLACEHOLDER"):
        UnitTemplateRenderer(logger=logger).render(template, SUBSTITUTIONS)
