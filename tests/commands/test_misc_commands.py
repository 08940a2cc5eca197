"""Tests for the 'status', 'login-item' and 'version' commands."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from breakminder import __version__
from breakminder.commands.version_command import app as version_app
from breakminder.main import app
from breakminder.utils.exit_codes import ERROR_LOGIN_ITEM

runner = CliRunner()


@pytest.fixture(autouse=True)
def _prefs(prefs_dir):
    yield prefs_dir


class TestVersionCommand:
    def test_version_output(self):
        result = runner.invoke(version_app, [])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_version_from_main(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestStatusCommand:
    def test_status_table(self):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "Current preferences" in result.output
        assert "Defaults" in result.output

    def test_status_json(self, prefs_dir):
        result = runner.invoke(app, ["status", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["work_interval"] == 25
        assert data["preferences_file"].endswith("preferences.json")


class TestLoginItemCommand:
    def test_enable(self, prefs_dir):
        with patch("breakminder.commands.login_item_command.LoginItemManager") as manager_cls:
            manager_cls.return_value.set_enabled.return_value = True
            result = runner.invoke(app, ["login-item", "enable"])
        assert result.exit_code == 0
        manager_cls.return_value.set_enabled.assert_called_once_with(True)
        stored = json.loads((prefs_dir / "preferences.json").read_text(encoding="utf-8"))
        assert stored["launch_at_login"] is True

    def test_disable_failure(self):
        with patch("breakminder.commands.login_item_command.LoginItemManager") as manager_cls:
            manager_cls.return_value.set_enabled.return_value = False
            result = runner.invoke(app, ["login-item", "disable"])
        assert result.exit_code == ERROR_LOGIN_ITEM

    def test_status(self):
        with patch("breakminder.commands.login_item_command.LoginItemManager") as manager_cls:
            manager_cls.return_value.is_enabled.return_value = True
            result = runner.invoke(app, ["login-item", "status"])
        assert result.exit_code == 0
        assert "registered" in result.output


def test_typo_suggests_command():
    result = runner.invoke(app, ["statu"])
    assert result.exit_code == 1
    assert "Did you mean" in result.output
