"""Raise a window of a class if one exists, otherwise launch a new one.

When a window of the class is already focused, the next window of the same
class (in hyprctl's client order) is raised instead, wrapping around after
the last one. The chosen window can be moved to the current workspace or to
the nearest empty workspace instead of being focused.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from helpers import ScriptConfig
from .hypr_helpers import HyprDispatchError, HyprIPC, HyprQueryError, Window

log = logging.getLogger("focus-or-launch")


class ConfigurationError(ValueError):
    """Raised for mutually exclusive command-line options."""


class Placement(Enum):
    NORMAL = "normal"
    CURRENT_WORKSPACE = "current-workspace"
    NEAREST_EMPTY_WORKSPACE = "nearest-empty-workspace"


class ActionKind(Enum):
    FOCUS = "focus"
    MOVE = "move"
    MOVE_TO_EMPTY = "move-to-empty"
    LAUNCH = "launch"
    LAUNCH_ON_EMPTY = "launch-on-empty"
    NOTHING = "nothing"


@dataclass(frozen=True, kw_only=True)
class Decision:
    kind: ActionKind
    address: Optional[str] = None


def placement_from_flags(move_to_current: bool, move_to_nearest_empty: bool) -> Placement:
    if move_to_current and move_to_nearest_empty:
        raise ConfigurationError(
            "--move-to-current and --move-to-nearest-empty cannot be passed at the same time."
        )
    if move_to_nearest_empty:
        return Placement.NEAREST_EMPTY_WORKSPACE
    if move_to_current:
        return Placement.CURRENT_WORKSPACE
    return Placement.NORMAL


def decide(candidates: Sequence[Window], focused: Optional[Window], placement: Placement) -> Decision:
    """Pick the one action to take.

    Args:
        candidates: Windows of the target class, in hyprctl's order
        focused: The focused window if it is of the target class, else None
        placement: Where the chosen window should end up

    Returns:
        The Decision. A focused window missing from candidates (the window
        list and the focus changed between the two queries) yields NOTHING.
    """
    if focused is not None:
        addresses = [w.address for w in candidates]
        if focused.address not in addresses:
            return Decision(kind=ActionKind.NOTHING)
        index = addresses.index(focused.address)
        target = candidates[(index + 1) % len(candidates)]
    elif candidates:
        target = candidates[0]
    elif placement is Placement.NEAREST_EMPTY_WORKSPACE:
        return Decision(kind=ActionKind.LAUNCH_ON_EMPTY)
    else:
        # a new window opens on the current workspace anyway
        return Decision(kind=ActionKind.LAUNCH)

    if placement is Placement.CURRENT_WORKSPACE:
        return Decision(kind=ActionKind.MOVE, address=target.address)
    if placement is Placement.NEAREST_EMPTY_WORKSPACE:
        return Decision(kind=ActionKind.MOVE_TO_EMPTY, address=target.address)
    return Decision(kind=ActionKind.FOCUS, address=target.address)


def _goto_empty_workspace(ipc: HyprIPC) -> None:
    # The follow-up command is issued even if this one fails
    try:
        ipc.goto_nearest_empty_workspace()
    except HyprDispatchError as e:
        log.warning("Switching to an empty workspace failed: %s", e)


def dispatch(ipc: HyprIPC, decision: Decision, launch_command: str) -> None:
    """Issue the hyprctl command(s) for a decision, in order.

    Raises:
        HyprDispatchError: the focus, move or launch command could not be issued
    """
    kind = decision.kind
    log.info("Action: %s %s", kind.value, decision.address or "")

    if kind is ActionKind.FOCUS:
        ipc.focus_window(decision.address)
    elif kind is ActionKind.MOVE:
        ipc.move_to_current(decision.address)
    elif kind is ActionKind.MOVE_TO_EMPTY:
        _goto_empty_workspace(ipc)
        ipc.move_to_current(decision.address)
    elif kind is ActionKind.LAUNCH:
        ipc.launch(launch_command)
    elif kind is ActionKind.LAUNCH_ON_EMPTY:
        _goto_empty_workspace(ipc)
        ipc.launch(launch_command)
    else:
        log.info("Focused window is no longer listed, nothing to do")


def focus_or_launch(ipc: HyprIPC, window_class: str, launch_command: str, placement: Placement) -> Decision:
    """Read a snapshot, decide and dispatch. Returns the decision taken."""
    try:
        snapshot = ipc.read_snapshot(window_class)
    except HyprQueryError as e:
        log.warning("Could not list windows, launching instead: %s", e)
        decision = Decision(kind=ActionKind.LAUNCH)
    else:
        candidates = snapshot.candidates(window_class)
        log.debug(
            "%d window(s) of class %s, focused: %s",
            len(candidates),
            window_class,
            snapshot.focused.address if snapshot.focused else None,
        )
        decision = decide(candidates, snapshot.focused, placement)

    dispatch(ipc, decision, launch_command)
    return decision


def main(
    window_class: str,
    launch_command: str,
    move_to_current: bool = False,
    move_to_nearest_empty: bool = False,
    verbose: bool = False,
    hyprctl: str = "hyprctl",
) -> int:
    """Main entry point for focus-or-launch."""
    try:
        placement = placement_from_flags(move_to_current, move_to_nearest_empty)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    script_config = ScriptConfig("hypr", "focus-or-launch")
    script_config.setup_logging(level=logging.DEBUG if verbose else logging.INFO)
    log.debug("class=%s launch=%r placement=%s", window_class, launch_command, placement.value)

    ipc = HyprIPC(hyprctl)
    try:
        focus_or_launch(ipc, window_class, launch_command, placement)
    except HyprDispatchError as e:
        log.error("Dispatch failed: %s", e)
        return 1
    return 0
