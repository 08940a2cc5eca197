"""Unit tests for adapters/login_item.py (file-based platforms)."""

from __future__ import annotations

import plistlib

import pytest

from breakminder.adapters.login_item import LAUNCH_AGENT_LABEL, LoginItemManager

COMMAND = ["/usr/bin/python3", "-m", "breakminder", "run"]


@pytest.fixture()
def linux_manager(tmp_path) -> LoginItemManager:
    return LoginItemManager(platform="linux", autostart_dir=tmp_path / "autostart", command=COMMAND)


@pytest.fixture()
def mac_manager(tmp_path) -> LoginItemManager:
    return LoginItemManager(platform="darwin", autostart_dir=tmp_path / "LaunchAgents", command=COMMAND)


class TestLinux:
    def test_enable_writes_desktop_entry(self, linux_manager):
        assert linux_manager.set_enabled(True) is True
        content = linux_manager.entry_path.read_text(encoding="utf-8")
        assert linux_manager.entry_path.name == "breakminder.desktop"
        assert "[Desktop Entry]" in content
        assert "Exec=/usr/bin/python3 -m breakminder run" in content
        assert linux_manager.is_enabled() is True

    def test_enable_is_idempotent(self, linux_manager):
        linux_manager.set_enabled(True)
        first = linux_manager.entry_path.stat().st_mtime_ns
        linux_manager.set_enabled(True)
        assert linux_manager.entry_path.stat().st_mtime_ns == first

    def test_disable_removes_entry(self, linux_manager):
        linux_manager.set_enabled(True)
        assert linux_manager.set_enabled(False) is True
        assert linux_manager.is_enabled() is False

    def test_disable_when_absent(self, linux_manager):
        assert linux_manager.set_enabled(False) is True

    def test_failure_reported_not_raised(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        manager = LoginItemManager(platform="linux", autostart_dir=blocker, command=COMMAND)
        assert manager.set_enabled(True) is False


class TestMacOS:
    def test_enable_writes_launch_agent(self, mac_manager):
        mac_manager.set_enabled(True)
        data = plistlib.loads(mac_manager.entry_path.read_bytes())
        assert mac_manager.entry_path.name == f"{LAUNCH_AGENT_LABEL}.plist"
        assert data["Label"] == LAUNCH_AGENT_LABEL
        assert data["ProgramArguments"] == COMMAND
        assert data["RunAtLoad"] is True

    def test_disable(self, mac_manager):
        mac_manager.set_enabled(True)
        mac_manager.set_enabled(False)
        assert not mac_manager.entry_path.exists()
