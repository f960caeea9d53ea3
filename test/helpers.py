"""
Builders for window manager states used across the test suite.

Stacks are written as strings of window names in visible order, the focused
one marked with ``*`` (the first window when nothing is marked), e.g.
``"A B* C"``. An empty string is an empty workspace.
"""

import itertools

from libinsertpos import stackset
from libinsertpos.placement import Focus, Position
from libinsertpos.stackset import Screen, Stack, StackSet, Workspace

LAYOUT = "tile"

POLICIES = list(itertools.product(Position, Focus))


def make_stack(order):
    names = order.split()
    if not names:
        return None
    focus = 0
    for i, name in enumerate(names):
        if name.endswith("*"):
            focus = i
    names = [name.rstrip("*") for name in names]
    return Stack(names[focus], names[:focus][::-1], names[focus + 1 :])


def show_stack(stack):
    if stack is None:
        return ""
    return " ".join(
        w + "*" if w == stack.focus else w for w in stackset.integrate(stack)
    )


def make_state(spaces, current=None, screens=1):
    """
    Build a stack set from a dict of tag to stack order. The first ``screens``
    workspaces are on screens, the others hidden.
    """
    workspaces = [Workspace(tag, LAYOUT, make_stack(order)) for tag, order in spaces.items()]
    on_screens = [Screen(ws, i) for i, ws in enumerate(workspaces[:screens])]
    s = StackSet(on_screens[0], on_screens[1:], workspaces[screens:])
    if current is not None:
        s = stackset.view(current, s)
    return s


def workspace(tag, s):
    for ws in stackset.workspaces(s):
        if ws.tag == tag:
            return ws
    raise KeyError(tag)


def show(tag, s):
    return show_stack(workspace(tag, s).stack)


def sample_states():
    """A handful of states, paired with the window to place in each."""
    yield make_state({"1": "X*"}), "X"
    yield make_state({"1": "A* B X"}), "X"
    yield make_state({"1": "A B* C", "2": "X D*"}), "X"
    yield make_state({"1": "A*", "2": "", "3": "B X* C"}, current="2"), "X"
    yield make_state({"1": "A", "2": "X"}, current="2"), "X"
    yield make_state({"1": "A* X", "2": "B", "3": "C"}, current="3", screens=2), "X"
    yield make_state({"1": "A* B", "2": "C* D", "3": "E X F*"}, screens=2), "X"
