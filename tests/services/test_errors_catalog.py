import pytest

from documensosetup.errors_catalog import actionable_error


def test_actionable_error_formats_message_with_suggested_action():
    message = actionable_error("pod_teardown_failed", pod_name="documenso-pod")

    assert "Failed to remove existing pod 'documenso-pod'." in message
    assert "Suggested action:" in message


def test_actionable_error_rejects_unknown_code():
    with pytest.raises(KeyError):
        actionable_error("no_such_error")
