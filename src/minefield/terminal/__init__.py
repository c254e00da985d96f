"""
Terminal front end.

Keyboard controls, frame rendering and the curses control loop.
"""
from .controls import Command, command_for_key
from .renderer import CursesRenderer, build_frame, render_ansi, render_text
from .session import Session, play

__all__ = [
    "Command",
    "command_for_key",
    "CursesRenderer",
    "build_frame",
    "render_ansi",
    "render_text",
    "Session",
    "play",
]
