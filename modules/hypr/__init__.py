"""Hyprland module: window focus and launch helpers."""

from .hypr_helpers import HyprIPC, Snapshot, Window

__all__ = ["HyprIPC", "Snapshot", "Window"]
