import logging

import pytest
from xdg import BaseDirectory

from modules.hypr.hypr_helpers import HyprDispatchError, Snapshot, Window


@pytest.fixture(autouse=True)
def xdg_state_home(tmp_path, monkeypatch):
    """Keep log files out of the real XDG state directory."""
    state_home = tmp_path / "state"
    monkeypatch.setattr(BaseDirectory, "xdg_state_home", str(state_home))
    return state_home


@pytest.fixture(autouse=True)
def restore_root_logging():
    root = logging.getLogger()
    level = root.level
    yield
    # drop what ScriptConfig.setup_logging installed
    for handler in root.handlers[:]:
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


class FakeIPC:
    """Records hyprctl calls instead of running them."""

    def __init__(self, windows=None, focused=None, *, list_error=None, fail_on=()):
        self.windows = list(windows or [])
        self.focused = focused
        self.list_error = list_error
        self.fail_on = set(fail_on)
        self.calls = []

    def read_snapshot(self, target_class):
        if self.list_error is not None:
            raise self.list_error
        focused = self.focused if self.focused and self.focused.window_class == target_class else None
        return Snapshot(all_windows=tuple(self.windows), focused=focused)

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.fail_on:
            raise HyprDispatchError(f"{name} failed")

    def focus_window(self, address):
        self._record("focus_window", address)

    def move_to_current(self, address):
        self._record("move_to_current", address)

    def goto_nearest_empty_workspace(self):
        self._record("goto_nearest_empty_workspace")

    def launch(self, command):
        self._record("launch", command)


@pytest.fixture
def windows():
    return [
        Window(window_class="firefox", address="0x1"),
        Window(window_class="kitty", address="0x2"),
        Window(window_class="firefox", address="0x3"),
        Window(window_class="firefox", address="0x4"),
    ]


@pytest.fixture
def make_ipc():
    return FakeIPC
