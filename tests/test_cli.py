"""CLI tests: development token minting."""

import jwt
from click.testing import CliRunner

from smartdeals.cli.main import cli
from smartdeals.config import settings


def test_issue_token_round_trips_through_secret():
    result = CliRunner().invoke(cli, ["issue-token", "alice@example.com", "--uid", "u-1"])
    assert result.exit_code == 0, result.output

    claims = jwt.decode(
        result.output.strip(),
        settings.auth_secret,
        algorithms=[settings.auth_algorithm],
        options={"verify_aud": False},
    )
    assert claims["email"] == "alice@example.com"
    assert claims["sub"] == "u-1"


def test_issue_token_refused_in_jwks_mode(monkeypatch):
    monkeypatch.setattr(settings, "auth_jwks_url", "https://keys.example.com/jwks.json")
    result = CliRunner().invoke(cli, ["issue-token", "alice@example.com"])
    assert result.exit_code != 0
    assert "JWKS" in result.output
