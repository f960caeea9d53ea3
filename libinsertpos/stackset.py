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
Immutable model of the window manager state.

A :class:`StackSet` is the set of all workspaces; exactly one of them is on
the current (displayed) screen, others may be on further screens
(``visible``) or on no screen at all (``hidden``). Every workspace has an
optional :class:`Stack`, a zipper over its windows: ``focus`` is the focused
window, ``up`` holds the windows above it closest first and ``down`` the
windows below it in order.

Nothing in here mutates. Every function returns a new value and leaves its
arguments alone, so callers can keep the old state around for comparison.
Functions acting on "the stack" act on the stack of the current workspace.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from libinsertpos.utils import StackSetError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

# Windows are opaque, only compared for equality.
Window = Any


@dataclass(frozen=True)
class Stack:
    focus: Window
    up: Sequence = ()
    down: Sequence = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "up", tuple(self.up))
        object.__setattr__(self, "down", tuple(self.down))

    def __iter__(self):
        return iter(integrate(self))

    def __contains__(self, window) -> bool:
        return window == self.focus or window in self.up or window in self.down


@dataclass(frozen=True)
class Workspace:
    tag: str
    layout: Any = None
    stack: Stack | None = None


@dataclass(frozen=True)
class Screen:
    workspace: Workspace
    screen_id: int = 0
    detail: Any = None


@dataclass(frozen=True)
class StackSet:
    current: Screen
    visible: Sequence[Screen] = ()
    hidden: Sequence[Workspace] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "visible", tuple(self.visible))
        object.__setattr__(self, "hidden", tuple(self.hidden))


# Stack level operations


def integrate(stack: Stack) -> list:
    """The windows of a stack in visible order, top first."""
    return [*reversed(stack.up), stack.focus, *stack.down]


def integrate_opt(stack: Stack | None) -> list:
    if stack is None:
        return []
    return integrate(stack)


def differentiate(windows: Iterable) -> Stack | None:
    """Build a stack from windows in visible order, focusing the first one."""
    order = list(windows)
    if not order:
        return None
    return Stack(order[0], (), order[1:])


def reverse_stack(stack: Stack) -> Stack:
    return Stack(stack.focus, stack.down, stack.up)


def focus_up_stack(stack: Stack) -> Stack:
    if stack.up:
        return Stack(stack.up[0], stack.up[1:], (stack.focus, *stack.down))
    if not stack.down:
        return stack
    # wrap around to the bottom
    rest = [stack.focus, *stack.down][::-1]
    return Stack(rest[0], rest[1:], ())


def focus_down_stack(stack: Stack) -> Stack:
    return reverse_stack(focus_up_stack(reverse_stack(stack)))


def swap_up_stack(stack: Stack) -> Stack:
    if stack.up:
        return Stack(stack.focus, stack.up[1:], (stack.up[0], *stack.down))
    # the top window is moved to the bottom
    return Stack(stack.focus, stack.down[::-1], ())


def swap_down_stack(stack: Stack) -> Stack:
    return reverse_stack(swap_up_stack(reverse_stack(stack)))


def focus_master_stack(stack: Stack) -> Stack:
    """Move the focus to the top of the stack, keeping the order."""
    if not stack.up:
        return stack
    master, *rest = reversed(stack.up)
    return Stack(master, (), (*rest, stack.focus, *stack.down))


def swap_master_stack(stack: Stack) -> Stack:
    """Move the focused window to the top of the stack."""
    if not stack.up:
        return stack
    master, *rest = reversed(stack.up)
    return Stack(stack.focus, (), (*rest, master, *stack.down))


def filter_stack(predicate: Callable[[Window], bool], stack: Stack) -> Stack | None:
    """
    Keep the windows matching predicate. If the focused window is dropped,
    focus moves to the next window below it, or failing that to the closest
    one above it.
    """
    up = tuple(w for w in stack.up if predicate(w))
    rest = [w for w in (stack.focus, *stack.down) if predicate(w)]
    if rest:
        return Stack(rest[0], up, rest[1:])
    if up:
        return Stack(up[0], up[1:], ())
    return None


# StackSet level operations


def new(layout: Any, tags: Iterable[str], screen_details: Iterable[Any] = (None,)) -> StackSet:
    """
    Create a stack set with one empty workspace per tag. The first tags are
    put on the screens (the first one current), the remaining ones are hidden.
    """
    tag_list = list(tags)
    details = list(screen_details)
    if not tag_list:
        raise StackSetError("A stack set needs at least one workspace")
    if len(set(tag_list)) != len(tag_list):
        raise StackSetError(f"Workspace tags must be unique: {tag_list}")
    if not details:
        raise StackSetError("A stack set needs at least one screen")
    if len(tag_list) < len(details):
        raise StackSetError(f"{len(details)} screens need at least as many workspaces")

    spaces = [Workspace(tag, layout) for tag in tag_list]
    screens = [
        Screen(ws, screen_id, detail)
        for screen_id, (ws, detail) in enumerate(zip(spaces, details))
    ]
    return StackSet(screens[0], screens[1:], spaces[len(screens) :])


def workspaces(s: StackSet) -> list[Workspace]:
    """All workspaces: the current one, then visible ones, then hidden ones."""
    return [s.current.workspace, *(screen.workspace for screen in s.visible), *s.hidden]


def current_tag(s: StackSet) -> str:
    return s.current.workspace.tag


def tag_member(tag: str, s: StackSet) -> bool:
    return any(ws.tag == tag for ws in workspaces(s))


def all_windows(s: StackSet) -> list:
    return [w for ws in workspaces(s) for w in integrate_opt(ws.stack)]


def find_workspace(window: Window, s: StackSet) -> Workspace | None:
    for ws in workspaces(s):
        if window in integrate_opt(ws.stack):
            return ws
    return None


def find_tag(window: Window, s: StackSet) -> str | None:
    ws = find_workspace(window, s)
    if ws is None:
        return None
    return ws.tag


def member(window: Window, s: StackSet) -> bool:
    return find_workspace(window, s) is not None


def index(s: StackSet) -> list:
    """Windows of the current workspace in visible order."""
    return integrate_opt(s.current.workspace.stack)


def peek(s: StackSet) -> Window | None:
    """The focused window of the current workspace, if any."""
    stack = s.current.workspace.stack
    if stack is None:
        return None
    return stack.focus


def view(tag: str, s: StackSet) -> StackSet:
    """
    Make the workspace tag current. Unknown tags are ignored.

    A workspace on another screen trades places with the current screen; a
    hidden workspace trades places with the current workspace. Either way
    the ordering of the other screens and hidden workspaces is kept, so
    viewing the previous tag again gives back an equal stack set.
    """
    if tag == current_tag(s):
        return s

    for i, screen in enumerate(s.visible):
        if screen.workspace.tag == tag:
            visible = (*s.visible[:i], s.current, *s.visible[i + 1 :])
            return replace(s, current=screen, visible=visible)

    for i, ws in enumerate(s.hidden):
        if ws.tag == tag:
            hidden = (*s.hidden[:i], s.current.workspace, *s.hidden[i + 1 :])
            return replace(s, current=replace(s.current, workspace=ws), hidden=hidden)

    return s


def on_workspace(tag: str, f: Callable[[StackSet], StackSet], s: StackSet) -> StackSet:
    """Apply f as if tag were current, then view the current tag again."""
    return view(current_tag(s), f(view(tag, s)))


def modify(default: Stack | None, f: Callable[[Stack], Stack | None], s: StackSet) -> StackSet:
    """
    Replace the stack of the current workspace with f(stack), or with default
    when the workspace is empty.
    """
    ws = s.current.workspace
    stack = default if ws.stack is None else f(ws.stack)
    return replace(s, current=replace(s.current, workspace=replace(ws, stack=stack)))


def modify_stack(f: Callable[[Stack], Stack], s: StackSet) -> StackSet:
    """Apply f to the stack of the current workspace, if it has one."""
    return modify(None, f, s)


def _map_workspaces(f: Callable[[Workspace], Workspace], s: StackSet) -> StackSet:
    return StackSet(
        replace(s.current, workspace=f(s.current.workspace)),
        tuple(replace(screen, workspace=f(screen.workspace)) for screen in s.visible),
        tuple(f(ws) for ws in s.hidden),
    )


def insert_up(window: Window, s: StackSet) -> StackSet:
    """
    Insert window above the focus of the current workspace and focus it.
    Does nothing if the window is already in any workspace.
    """
    if member(window, s):
        return s
    return modify(
        Stack(window),
        lambda stack: Stack(window, stack.up, (stack.focus, *stack.down)),
        s,
    )


def delete(window: Window, s: StackSet) -> StackSet:
    """Remove window from every workspace. Does nothing if it is absent."""
    if not member(window, s):
        return s

    def remove(ws: Workspace) -> Workspace:
        if ws.stack is None or window not in ws.stack:
            return ws
        return replace(ws, stack=filter_stack(lambda w: w != window, ws.stack))

    return _map_workspaces(remove, s)


def focus_up(s: StackSet) -> StackSet:
    return modify_stack(focus_up_stack, s)


def focus_down(s: StackSet) -> StackSet:
    return modify_stack(focus_down_stack, s)


def swap_up(s: StackSet) -> StackSet:
    return modify_stack(swap_up_stack, s)


def swap_down(s: StackSet) -> StackSet:
    return modify_stack(swap_down_stack, s)


def swap_master(s: StackSet) -> StackSet:
    return modify_stack(swap_master_stack, s)


def focus_master(s: StackSet) -> StackSet:
    return modify_stack(focus_master_stack, s)


def focus_window(window: Window, s: StackSet) -> StackSet:
    """
    Focus window, making its workspace current. Does nothing if the window
    is absent or already focused.
    """
    if peek(s) == window:
        return s
    tag = find_tag(window, s)
    if tag is None:
        return s

    s = view(tag, s)
    windows = index(s)
    i = windows.index(window)
    return modify_stack(lambda _: Stack(window, windows[:i][::-1], windows[i + 1 :]), s)


def shift_win(tag: str, window: Window, s: StackSet) -> StackSet:
    """
    Move window from its workspace to the top of workspace tag, keeping the
    current workspace current.
    """
    source = find_tag(window, s)
    if source is None or source == tag or not tag_member(tag, s):
        return s
    return on_workspace(tag, lambda ss: insert_up(window, ss), delete(window, s))
