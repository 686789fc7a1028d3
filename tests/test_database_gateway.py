import logging
import subprocess
import sys

import pytest

from hydrogen_backup.data import process_runner
from hydrogen_backup.data.config_loader import ServerConfig
from hydrogen_backup.data.database_gateway import DatabaseGateway
from hydrogen_backup.data.process_runner import ProcessRunner, redact
from hydrogen_backup.errors import ProcessRunError


CONFIG = ServerConfig(endpoint="tcp://db:8529", username="root", password="secret")


class TestCommands:
    def test_dump_command(self):
        assert DatabaseGateway(CONFIG).dump_command("hydrogenbackup_1") == [
            "arangodump",
            "--output-directory", "hydrogenbackup_1",
            "--server.endpoint", "tcp://db:8529",
            "--server.username", "root",
            "--server.password", "secret",
            "--all-databases", "true",
            "--include-system-collections", "true",
        ]

    def test_restore_command(self):
        assert DatabaseGateway(CONFIG).restore_command("hydrogenbackup_1") == [
            "arangorestore",
            "--input-directory", "hydrogenbackup_1",
            "--server.endpoint", "tcp://db:8529",
            "--server.username", "root",
            "--server.password", "secret",
            "--all-databases", "true",
            "--create-database", "true",
            "--include-system-collections", "true",
        ]

    def test_custom_binaries(self):
        cfg = ServerConfig(arangodump_path="/opt/dump", arangorestore_path="/opt/restore")
        gw = DatabaseGateway(cfg)
        assert gw.dump_command("x")[0] == "/opt/dump"
        assert gw.restore_command("x")[0] == "/opt/restore"

    def test_dump_and_restore_use_runner(self, fake_runner):
        gw = DatabaseGateway(CONFIG, runner=fake_runner)
        gw.dump("hydrogenbackup_1")
        gw.restore("hydrogenbackup_1")
        assert [c[0] for c in fake_runner.calls] == ["arangodump", "arangorestore"]


class TestProcessRunner:
    def test_success(self):
        ProcessRunner().run([sys.executable, "-c", "pass"])

    def test_non_zero_exit(self):
        with pytest.raises(ProcessRunError) as exc:
            ProcessRunner().run([sys.executable, "-c", "raise SystemExit(3)"])
        assert exc.value.returncode == 3
        assert "exit status 3" in str(exc.value)

    def test_missing_binary(self):
        with pytest.raises(ProcessRunError) as exc:
            ProcessRunner().run(["hydrogenbackup-no-such-binary"])
        assert exc.value.returncode is None
        assert "could not be started" in str(exc.value)

    def test_streams_are_inherited(self, monkeypatch):
        seen = {}

        def fake_run(args, **kwargs):
            seen["args"] = args
            seen["kwargs"] = kwargs
            return subprocess.CompletedProcess(args, 0)

        monkeypatch.setattr(process_runner.subprocess, "run", fake_run)
        ProcessRunner().run(("arangodump", "--all-databases", "true"))
        assert seen["args"] == ["arangodump", "--all-databases", "true"]
        assert seen["kwargs"] == {}

    def test_logs_masked_command(self, monkeypatch, caplog):
        monkeypatch.setattr(
            process_runner.subprocess, "run",
            lambda args, **kwargs: subprocess.CompletedProcess(args, 0),
        )
        with caplog.at_level(logging.DEBUG, logger="hydrogen_backup.data.process_runner"):
            ProcessRunner().run(DatabaseGateway(CONFIG).dump_command("hydrogenbackup_1"))
        assert "--server.password ****" in caplog.text
        assert "secret" not in caplog.text


def test_redact():
    assert redact(["a", "--server.password", "pw", "b"]) == ["a", "--server.password", "****", "b"]
    assert redact(["--server.password"]) == ["--server.password"]
