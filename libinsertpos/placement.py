# Copyright (c) 2026 insertpos contributors
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
"""
Configure where new windows are added and which window gets the focus.

Add :func:`setup_insert_position` to the configuration::

    from libinsertpos.config import Config
    from libinsertpos.placement import Focus, Position, setup_insert_position

    config = setup_insert_position(Position.MASTER, Focus.NEWER, Config())

or put :func:`insert_position` into the manage hook directly (not both)::

    config = Config(manage_hook=hook.compose(insert_position("master", "newer"), my_hook))

Hooks that move windows to other workspaces, such as
:func:`~libinsertpos.hook.do_shift`, must run before the insert position so
that the window order comes out right. Hooks compose right to left, so the
insert position belongs leftmost. The window manager's stock behaviour is
``insert_position(Position.ABOVE, Focus.NEWER)``.
"""
from __future__ import annotations

from enum import Enum
from functools import partial
from typing import TYPE_CHECKING

from libinsertpos import configurable, hook, stackset, utils
from libinsertpos.log_utils import logger
from libinsertpos.stackset import Stack
from libinsertpos.utils import ConfigError, StackSetError

if TYPE_CHECKING:
    from libinsertpos.config import Config
    from libinsertpos.hook import ManageHook, Transform
    from libinsertpos.stackset import StackSet, Window


class Position(Enum):
    MASTER = "master"
    END = "end"
    ABOVE = "above"
    BELOW = "below"


class Focus(Enum):
    NEWER = "newer"
    OLDER = "older"


def _coerce(kind: type[Enum], value, option: str):
    if isinstance(value, kind):
        return value
    if isinstance(value, str):
        try:
            return kind(value.lower())
        except ValueError:
            pass
    choices = ", ".join(member.value for member in kind)
    raise ConfigError(f"Invalid {option} {value!r}, expected one of: {choices}")


def insert_down(window: Window, s: StackSet) -> StackSet:
    """Insert window below the focus of the current workspace and focus it."""
    return stackset.swap_down(stackset.insert_up(window, s))


def focus_last_stack(stack: Stack) -> Stack:
    """Focus the bottom window, keeping the order."""
    last, *rest = reversed(stackset.integrate(stack))
    return Stack(last, rest, ())


def viewing_workspace(window: Window, f: Transform) -> Transform:
    """
    Apply f to the state while the workspace holding window is current.

    The current tag is noted, the workspace holding window is viewed, f is
    applied and the noted tag is viewed again, so f can act on "the current
    stack" even for windows sent to workspaces that are not displayed. If no
    workspace holds the window the state is returned as it is.
    """

    def transform(s: StackSet) -> StackSet:
        home = stackset.current_tag(s)
        owner = stackset.find_tag(window, s)
        if owner is None:
            logger.debug("Window %r is in no workspace, not placing it", window)
            return s
        if owner != home:
            logger.debug("Placing window %r on workspace %s from %s", window, owner, home)

        viewed = stackset.view(owner, s)
        changed = f(viewed)
        return stackset.view(home, changed)

    return transform


def _focus_new(window: Window, s: StackSet) -> StackSet:
    if window not in stackset.index(s):
        raise StackSetError(f"Window {window!r} vanished while being inserted")
    return stackset.focus_window(window, s)


def _keep_focus(window: Window, s: StackSet) -> StackSet:
    return s


_PLACEMENTS = {
    Position.MASTER: lambda w, s: stackset.insert_up(w, stackset.focus_master(s)),
    Position.END: lambda w, s: insert_down(w, stackset.modify_stack(focus_last_stack, s)),
    Position.ABOVE: stackset.insert_up,
    Position.BELOW: insert_down,
}

_FOCUS_UPDATES = {
    Focus.NEWER: _focus_new,
    Focus.OLDER: _keep_focus,
}


class InsertPosition(configurable.Configurable):
    """
    Manage hook placing new windows.

    Called with a window, returns the state transform that takes the window
    out of its workspace, puts it back at ``position`` and sets the focus
    according to ``focus``. Values may be given as enum members or as their
    names, e.g. ``InsertPosition(position="below", focus="older")``.
    """

    defaults = [
        (
            "position",
            Position.ABOVE,
            "Where new windows go: ``master`` (top of the stack), ``end`` "
            "(bottom of the stack), ``above`` or ``below`` the focused window.",
        ),
        (
            "focus",
            Focus.NEWER,
            "Window focused afterwards: ``newer`` (the new window) or "
            "``older`` (the window focused before).",
        ),
    ]

    def __init__(self, **config):
        configurable.Configurable.__init__(self, **config)
        self.add_defaults(InsertPosition.defaults)
        self.check_options()
        self.position = _coerce(Position, self.position, "position")
        self.focus = _coerce(Focus, self.focus, "focus")

    def __call__(self, window: Window) -> Transform:
        return viewing_workspace(
            window,
            utils.compose(
                partial(_FOCUS_UPDATES[self.focus], window),
                self._insert(window),
                partial(stackset.delete, window),
            ),
        )

    def _insert(self, window: Window) -> Transform:
        place = _PLACEMENTS[self.position]

        def insert(s: StackSet) -> StackSet:
            # placing moves the focus, hand it back to where it was
            focused = stackset.peek(s)
            s = place(window, s)
            if focused is not None:
                s = stackset.focus_window(focused, s)
            return s

        return insert

    def __repr__(self) -> str:
        return f"<InsertPosition {self.position.value} {self.focus.value}>"


def insert_position(pos: Position | str, foc: Focus | str) -> ManageHook:
    """Manage hook placing new windows at pos and focusing according to foc."""
    return InsertPosition(position=pos, focus=foc)


def setup_insert_position(pos: Position | str, foc: Focus | str, config: Config) -> Config:
    """Return config with :func:`insert_position` run after its manage hook."""
    placement = insert_position(pos, foc)
    logger.debug("Setting up %r", placement)
    return config.replace(manage_hook=hook.compose(placement, config.manage_hook))
