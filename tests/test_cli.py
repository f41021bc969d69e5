"""
Test Suite for the gbp-audit command
"""

from unittest.mock import AsyncMock, patch

import pytest

from gbp_audit import cli
from gbp_audit.errors import ConnectivityError, ServerError


@pytest.fixture(autouse=True)
def _endpoint_env(monkeypatch):
    monkeypatch.setenv("GBP_AUDIT_ENDPOINT", "http://audit.test/api/audit")


class TestMain:

    def test_prints_report(self, capsys, share_link, neglected_metrics):
        fetch = AsyncMock(return_value=neglected_metrics)
        with patch("gbp_audit.audit.fetch_profile_metrics", fetch):
            cli.main([share_link])

        out = capsys.readouterr().out
        assert "Corner Bakery" in out
        assert "0%" in out
        assert "Increase Review Count" in out
        fetch.assert_awaited_once()
        assert fetch.await_args.args[0] == share_link

    def test_json_output(self, capsys, share_link, optimized_metrics):
        with patch("gbp_audit.audit.fetch_profile_metrics", AsyncMock(return_value=optimized_metrics)):
            cli.main([share_link, "--json"])

        out = capsys.readouterr().out
        assert '"score": 100' in out
        assert '"businessName": "Mile High Plumbing"' in out

    def test_endpoint_flag_overrides_environment(self, share_link, optimized_metrics):
        fetch = AsyncMock(return_value=optimized_metrics)
        with patch("gbp_audit.audit.fetch_profile_metrics", fetch):
            cli.main([share_link, "--endpoint", "http://other.test/audit"])

        settings = fetch.await_args.args[1]
        assert settings.endpoint == "http://other.test/audit"

    def test_invalid_link_exits_1(self, capsys):
        fetch = AsyncMock()
        with patch("gbp_audit.audit.fetch_profile_metrics", fetch):
            with pytest.raises(SystemExit) as exc_info:
                cli.main(["not-a-link"])

        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().out
        fetch.assert_not_awaited()

    @pytest.mark.parametrize(
        "error",
        [ServerError("HTTP 500", status_code=500), ConnectivityError("refused")],
    )
    def test_audit_errors_exit_1(self, capsys, share_link, error):
        with patch("gbp_audit.audit.fetch_profile_metrics", AsyncMock(side_effect=error)):
            with pytest.raises(SystemExit) as exc_info:
                cli.main([share_link])

        assert exc_info.value.code == 1
        assert "Could not connect to the audit server" in capsys.readouterr().out

    def test_unexpected_failure_prints_error_and_exits_1(self, capsys, share_link):
        with patch("gbp_audit.audit.fetch_profile_metrics", AsyncMock(side_effect=RuntimeError("boom"))):
            with pytest.raises(SystemExit) as exc_info:
                cli.main([share_link])

        assert exc_info.value.code == 1
        out = capsys.readouterr().out
        assert "Error:" in out
        assert "boom" in out
