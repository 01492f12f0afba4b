import pytest

from documensosetup.errors import ProvisionerError
from documensosetup.services.pod_manager import (
    PodManagerService,
    extract_publish_ports,
    publish_arguments,
)

POD_DEFINITION = """[Pod]
PodName=documenso-pod
PublishPort=8084:3000
# PublishPort=9999:9999
PublishPort=443:443
"""


@pytest.fixture
def service(logger, console):
    return PodManagerService(
        logger=logger,
        console=console,
        pod_name="documenso-pod",
        fallback_publish="8084:3000",
    )


def _creates(fake_commands):
    return [call for call in fake_commands.calls if call[1:3] == ["pod", "create"]]


def test_publish_ports_are_extracted_in_order():
    ports = extract_publish_ports(POD_DEFINITION)

    assert publish_arguments(ports) == ["--publish", "8084:3000", "--publish", "443:443"]


def test_missing_pod_file_uses_fallback_mapping(tmp_path, service, console, fake_commands):
    service.reconcile_pod(tmp_path / "documenso.pod", fake_commands)

    assert _creates(fake_commands) == [
        ["podman", "pod", "create", "--name", "documenso-pod", "--publish", "8084:3000"]
    ]
    assert "not found" in console.text


def test_absent_pod_is_created_without_teardown(tmp_path, service, fake_commands):
    pod_file = tmp_path / "documenso.pod"
    pod_file.write_text(POD_DEFINITION, encoding="utf-8")

    service.reconcile_pod(pod_file, fake_commands)

    assert ["podman", "pod", "stop", "documenso-pod"] not in fake_commands.calls
    assert _creates(fake_commands) == [
        [
            "podman",
            "pod",
            "create",
            "--name",
            "documenso-pod",
            "--publish",
            "8084:3000",
            "--publish",
            "443:443",
        ]
    ]
    assert fake_commands.pod_present is True


def test_existing_pod_with_containers_is_replaced(tmp_path, service, fake_commands):
    fake_commands.pod_present = True
    fake_commands.pod_containers = ["abc123", "def456"]

    service.reconcile_pod(tmp_path / "documenso.pod", fake_commands)

    assert ["podman", "pod", "stop", "documenso-pod"] in fake_commands.calls
    assert ["podman", "rm", "-f", "abc123", "def456"] in fake_commands.calls
    assert ["podman", "pod", "rm", "-f", "documenso-pod"] in fake_commands.calls
    assert len(_creates(fake_commands)) == 1
    assert fake_commands.pod_present is True
    assert fake_commands.pod_containers == []


def test_existing_empty_pod_skips_container_removal(tmp_path, service, fake_commands):
    fake_commands.pod_present = True

    service.reconcile_pod(tmp_path / "documenso.pod", fake_commands)

    assert not any(call[1:3] == ["rm", "-f"] for call in fake_commands.calls)
    assert len(_creates(fake_commands)) == 1


def test_teardown_failure_aborts_before_create(tmp_path, service, fake_commands):
    fake_commands.pod_present = True
    fake_commands.pod_stuck = True

    with pytest.raises(ProvisionerError, match="Failed to remove existing pod") as error:
        service.reconcile_pod(tmp_path / "documenso.pod", fake_commands)

    assert error.value.exit_code == 1
    assert _creates(fake_commands) == []
