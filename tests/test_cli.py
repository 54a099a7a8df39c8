"""
clocksync Command Line Tests
"""

import json
from unittest.mock import patch

import pytest

from clocksync.cli import main
from clocksync.core.types import ClockTime, ProtocolKind, SyncMode
from clocksync.errors import ClockSyncError, ErrorCode, NotFoundError, UnsupportedError

pytestmark = pytest.mark.usefixtures("restore_root_logger")


class TestMain:
    """Tests for the clocksync entry point."""

    def test_observe(self, capsys):
        with patch("clocksync.cli.sync_time", return_value=ClockTime(2024, 1, 2, 3, 4, 5)) as sync:
            assert main(["time.example.com", "--protocol", "tp"]) == 0

        server, protocol, mode, _config = sync.call_args.args
        assert server == "time.example.com"
        assert protocol is ProtocolKind.TIME_PROTOCOL
        assert mode is SyncMode.OBSERVE_ONLY
        assert capsys.readouterr().out.strip() == "2024-01-02 03:04:05"

    def test_apply(self, capsys):
        with patch("clocksync.cli.sync_time", return_value=ClockTime.zero()) as sync:
            assert main(["pool.ntp.org", "--apply"]) == 0

        assert sync.call_args.args[1] is ProtocolKind.NETWORK_TIME_PROTOCOL
        assert sync.call_args.args[2] is SyncMode.OBSERVE_AND_APPLY
        assert capsys.readouterr().out.strip() == "clock updated"

    def test_json(self, capsys):
        with patch("clocksync.cli.sync_time", return_value=ClockTime(2024, 1, 2, 3, 4, 5)):
            assert main(["pool.ntp.org", "--json"]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["ok"] is True
        assert result["time"]["year"] == 2024

    def test_not_found_exit_code(self, capsys):
        with patch("clocksync.cli.sync_time", side_effect=NotFoundError("nowhere.invalid")):
            assert main(["nowhere.invalid"]) == 3
        assert "nowhere.invalid" in capsys.readouterr().err

    def test_json_error(self, capsys):
        with patch("clocksync.cli.sync_time", side_effect=NotFoundError("nowhere.invalid")):
            main(["nowhere.invalid", "--json"])
        result = json.loads(capsys.readouterr().out)
        assert result["ok"] is False
        assert result["error"]["name"] == "NOT_FOUND"

    def test_ntpd_observe_unsupported(self, capsys):
        """Test the real ntpd facade rejects observing without running anything."""
        with patch("clocksync.protocol.executor.subprocess.Popen") as popen:
            assert main(["192.0.2.1", "--ntp-client", "ntpd"]) == 5
        popen.assert_not_called()

    def test_ntp_client_override(self):
        with patch("clocksync.cli.sync_time", side_effect=UnsupportedError("x")) as sync:
            main(["192.0.2.1", "--ntp-client", "ntpd"])
        assert sync.call_args.args[3].ntp.client == "ntpd"

    def test_info(self, capsys):
        assert main(["--info"]) == 0
        info = json.loads(capsys.readouterr().out)
        assert info["tp"]["commands"]["observe"] == "/usr/sbin/rdate -p %s"

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "clocksync.json"
        path.write_text(json.dumps({"tools": {"rdate": "/opt/bin/rdate"}}))
        assert main(["--info", "--config", str(path)]) == 0
        info = json.loads(capsys.readouterr().out)
        assert info["tp"]["commands"]["observe"] == "/opt/bin/rdate -p %s"

    def test_missing_config_file(self, tmp_path, capsys):
        missing = tmp_path / "absent.json"
        assert main(["192.0.2.1", "--config", str(missing)]) == 2
        assert "cannot load" in capsys.readouterr().err

    def test_unknown_config_key(self, tmp_path, capsys):
        path = tmp_path / "clocksync.json"
        path.write_text(json.dumps({"ntp": {"clinet": "ntpd"}}))
        assert main(["192.0.2.1", "--config", str(path)]) == 2
        assert "clinet" in capsys.readouterr().err

    def test_malformed_config_file(self, tmp_path):
        path = tmp_path / "clocksync.json"
        path.write_text("{not json")
        assert main(["192.0.2.1", "--config", str(path)]) == 2

    def test_unknown_error_exit_code(self, capsys):
        error = ClockSyncError(ErrorCode.UNKNOWN_ERROR, "unexpected")
        with patch("clocksync.cli.sync_time", side_effect=error):
            assert main(["192.0.2.1"]) == 1
        assert "unexpected" in capsys.readouterr().err

    def test_invalid_config(self, capsys):
        assert main(["192.0.2.1", "--log-level", "LOUD"]) == 2
        assert "Invalid log level" in capsys.readouterr().err

    def test_missing_server(self):
        with pytest.raises(SystemExit):
            main([])
