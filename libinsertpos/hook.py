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
Manage hooks decide what happens to the window manager state when a new
window appears.

A manage hook is called with the new window and returns a state transform,
a function from :class:`~libinsertpos.stackset.StackSet` to ``StackSet``.
Hooks are combined with :func:`compose`, which works like function
composition: the rightmost hook runs first.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from libinsertpos import stackset, utils
from libinsertpos.log_utils import logger

if TYPE_CHECKING:
    from collections.abc import Callable

    from libinsertpos.stackset import StackSet, Window

    Transform = Callable[[StackSet], StackSet]
    ManageHook = Callable[[Window], Transform]


def id_hook(window: Window) -> Transform:
    return utils.compose()


def compose(*hooks: ManageHook) -> ManageHook:
    """
    Combine manage hooks into one. ``compose(a, b)`` runs ``b`` and then
    ``a`` on the result, so a hook placed leftmost sees the work of every
    hook to its right.
    """
    if not hooks:
        return id_hook

    def composed(window: Window) -> Transform:
        return utils.compose(*(h(window) for h in hooks))

    return composed


def do_f(f: Transform) -> ManageHook:
    """A hook applying f whatever the window is."""

    def hook(window: Window) -> Transform:
        return f

    return hook


def do_shift(tag: str) -> ManageHook:
    """A hook sending the window to workspace tag."""

    def hook(window: Window) -> Transform:
        def shift(s: StackSet) -> StackSet:
            logger.debug("Shifting window %r to workspace %s", window, tag)
            return stackset.shift_win(tag, window, s)

        return shift

    return hook


def when(predicate: Callable[[Window], bool], hook: ManageHook) -> ManageHook:
    """Run hook only for windows matching predicate."""

    def conditional(window: Window) -> Transform:
        if predicate(window):
            return hook(window)
        return id_hook(window)

    return conditional
