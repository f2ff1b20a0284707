"""
Common helper functions for Hyprland scripts.

Keeps the hyprctl-facing pieces in one place: the window snapshot types,
the JSON queries that build them and the dispatch commands.
"""

from __future__ import annotations

import json
import logging
import subprocess
from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "HyprError",
    "HyprQueryError",
    "HyprDispatchError",
    "Window",
    "Snapshot",
    "HyprIPC",
]


class HyprError(RuntimeError):
    """Base class for failures talking to hyprctl."""


class HyprQueryError(HyprError):
    """A hyprctl query could not be run or returned unusable data."""


class HyprDispatchError(HyprError):
    """A hyprctl command could not be issued."""


@dataclass(frozen=True)
class Window:
    window_class: str
    address: str

    @classmethod
    def from_client(cls, client: Any) -> "Window":
        """Build a Window from one hyprctl client object."""
        if not isinstance(client, dict):
            raise HyprQueryError(f"Expected a client object, got {type(client).__name__}")
        window_class = client.get("class")
        address = client.get("address")
        if not isinstance(window_class, str) or not isinstance(address, str):
            raise HyprQueryError(f"Client is missing 'class' or 'address': {client!r}")
        return cls(window_class=window_class, address=address)


@dataclass(frozen=True)
class Snapshot:
    all_windows: tuple[Window, ...]
    focused: Optional[Window] = None

    def candidates(self, target_class: str) -> list[Window]:
        """Windows of target_class, in the order hyprctl reported them."""
        return [w for w in self.all_windows if w.window_class == target_class]


class HyprIPC:
    """Helper class for talking to Hyprland through hyprctl."""

    def __init__(self, hyprctl: str = "hyprctl"):
        if not isinstance(hyprctl, str) or not hyprctl.strip():
            raise ValueError("hyprctl must be a non-empty string")
        self.hyprctl = hyprctl
        self.log = logging.getLogger("HyprIPC")

    # --- queries ---

    def send_request(self, request_name: str) -> Any:
        """
        Run a JSON query (e.g. "clients", "activewindow") and return the parsed output.

        Raises:
            HyprQueryError: hyprctl is missing, failed, or printed invalid JSON
        """
        cmd = [self.hyprctl, request_name, "-j"]
        self.log.debug("Sending request: %s", " ".join(cmd))

        try:
            completed = subprocess.run(
                cmd, capture_output=True, encoding="utf-8", errors="replace", check=False
            )
        except OSError as e:
            raise HyprQueryError(f"Could not run `{' '.join(cmd)}`: {e}") from e

        if completed.returncode != 0:
            raise HyprQueryError(
                f"`{' '.join(cmd)}` exited with status {completed.returncode}: {completed.stderr.strip()}"
            )

        self.log.debug("Response: %s", completed.stdout.strip())
        try:
            return json.loads(completed.stdout)
        except json.JSONDecodeError as e:
            raise HyprQueryError(f"Failed to parse `{' '.join(cmd)}`: {e}") from e

    def list_windows(self) -> list[Window]:
        """Return every open window, in hyprctl's order."""
        clients = self.send_request("clients")
        if not isinstance(clients, list):
            raise HyprQueryError(f"Expected a list of clients, got {type(clients).__name__}")
        return [Window.from_client(client) for client in clients]

    def current_focused(self, target_class: str) -> Optional[Window]:
        """
        Return the focused window if it is of target_class.

        Returns None when nothing is focused, the query fails or the focused
        window belongs to another class.
        """
        try:
            window = Window.from_client(self.send_request("activewindow"))
        except HyprQueryError as e:
            self.log.debug("No usable focused window: %s", e)
            return None

        if window.window_class != target_class:
            self.log.debug("Focused window is of class %s, not %s", window.window_class, target_class)
            return None
        return window

    def read_snapshot(self, target_class: str) -> Snapshot:
        """Query the window list, then the focused window.

        Raises:
            HyprQueryError: the window list is unavailable
        """
        windows = self.list_windows()
        focused = self.current_focused(target_class)
        return Snapshot(all_windows=tuple(windows), focused=focused)

    # --- commands ---

    def send_action(self, *args: str) -> None:
        """
        Issue a hyprctl command without waiting for it to finish.

        Raises:
            HyprDispatchError: the hyprctl process could not be spawned
        """
        cmd = [self.hyprctl, *args]
        self.log.debug("Sending action: %s", " ".join(cmd))
        try:
            subprocess.Popen(cmd, stdout=subprocess.DEVNULL)
        except OSError as e:
            raise HyprDispatchError(f"Could not run `{' '.join(cmd)}`: {e}") from e

    def focus_window(self, address: str) -> None:
        self.send_action("dispatch", "focuswindow", f"address:{address}")

    def move_to_current(self, address: str) -> None:
        """Move a window to the active workspace."""
        self.send_action("dispatch", "movetoworkspace", f"+0,address:{address}")

    def goto_nearest_empty_workspace(self) -> None:
        self.send_action("dispatch", "workspace", "empty")

    def launch(self, command: str) -> None:
        self.send_action("dispatch", "exec", command)
