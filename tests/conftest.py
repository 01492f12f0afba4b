import subprocess
from pathlib import Path

import pytest


class DummyLogger:
    def __init__(self):
        self.warnings = []

    def debug(self, *_args, **_kwargs):
        return None

    def info(self, *_args, **_kwargs):
        return None

    def warning(self, message, *args, **_kwargs):
        self.warnings.append(message % args if args else message)

    def error(self, *_args, **_kwargs):
        return None


class DummyConsole:
    def __init__(self):
        self.lines = []

    def print(self, *args, **_kwargs):
        self.lines.append(" ".join(str(arg) for arg in args))

    @property
    def text(self):
        return "\n".join(self.lines)


class FakeCommands:
    """Simulates podman, openssl and systemctl for run_cmd callers."""

    def __init__(self):
        self.calls = []
        self.podman_version = "podman version 4.9.3"
        self.pod_present = False
        self.pod_containers = []
        self.pod_stuck = False
        self.openssl_available = True
        self.export_fails = False

    def __call__(self, cmd, policy=None, capture_output=False):
        self.calls.append(list(cmd))

        if cmd[0] == "podman":
            return self._podman(cmd)
        if cmd[0] == "openssl":
            return self._openssl(cmd)
        if cmd[0] == "systemctl":
            return self._result(cmd, 0)
        return self._result(cmd, 127)

    def commands_for(self, program):
        return [call for call in self.calls if call[0] == program]

    def _podman(self, cmd):
        args = cmd[1:]
        if args == ["--version"]:
            return self._result(cmd, 0, stdout=self.podman_version + "\n")
        if args[:2] == ["pod", "exists"]:
            return self._result(cmd, 0 if self.pod_present else 1)
        if args[:2] == ["pod", "stop"]:
            return self._result(cmd, 0 if self.pod_present else 125)
        if args[:1] == ["ps"]:
            return self._result(cmd, 0, stdout="".join(f"{cid}\n" for cid in self.pod_containers))
        if args[:2] == ["rm", "-f"]:
            self.pod_containers = [cid for cid in self.pod_containers if cid not in args[2:]]
            return self._result(cmd, 0)
        if args[:3] == ["pod", "rm", "-f"]:
            if not self.pod_stuck:
                self.pod_present = False
            return self._result(cmd, 0)
        if args[:2] == ["pod", "create"]:
            if self.pod_present:
                return self._result(cmd, 125)
            self.pod_present = True
            self.pod_containers = []
            return self._result(cmd, 0)
        return self._result(cmd, 0)

    def _openssl(self, cmd):
        if not self.openssl_available:
            return self._result(cmd, 127)
        if cmd[1] == "req":
            Path(cmd[cmd.index("-keyout") + 1]).write_text("KEY", encoding="utf-8")
            Path(cmd[cmd.index("-out") + 1]).write_text("CRT", encoding="utf-8")
            return self._result(cmd, 0)
        if cmd[1] == "pkcs12":
            if self.export_fails:
                return self._result(cmd, 1)
            Path(cmd[cmd.index("-out") + 1]).write_bytes(b"P12")
            return self._result(cmd, 0)
        return self._result(cmd, 1)

    @staticmethod
    def _result(cmd, returncode, stdout=""):
        return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr="")


@pytest.fixture
def logger():
    return DummyLogger()


@pytest.fixture
def console():
    return DummyConsole()


@pytest.fixture
def fake_commands():
    return FakeCommands()
