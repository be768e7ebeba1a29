# tests/test_tokens.py
"""Tests for the development user/token script."""

import pytest
from jose import jwt

from commentbox.core.settings import settings
from commentbox.scripts import tokens


def test_create_user_and_issue_token(db_session) -> None:
    user = tokens.create_user(db_session, "Script User", "script@example.com")
    token = tokens.issue_token(db_session, user.id)

    claims = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    assert claims["sub"] == str(user.id)


def test_issue_token_for_unknown_user(db_session) -> None:
    with pytest.raises(LookupError):
        tokens.issue_token(db_session, 404404)


def test_cli_reports_unknown_user(capsys) -> None:
    assert tokens.main(["issue-token", "404404"]) == 1
    assert "does not exist" in capsys.readouterr().err
