import pytest

from libinsertpos import stackset
from libinsertpos.stackset import Stack
from libinsertpos.utils import StackSetError
from test.helpers import make_stack, make_state, show, show_stack, workspace


def test_integrate():
    stack = Stack("C", ("B", "A"), ("D",))
    assert stackset.integrate(stack) == ["A", "B", "C", "D"]
    assert list(stack) == ["A", "B", "C", "D"]
    assert "A" in stack
    assert "E" not in stack


def test_integrate_opt_empty():
    assert stackset.integrate_opt(None) == []


def test_differentiate():
    assert stackset.differentiate([]) is None
    assert stackset.differentiate(["A", "B"]) == Stack("A", (), ("B",))


def test_stack_accepts_lists():
    assert Stack("A", ["B"], ["C"]) == Stack("A", ("B",), ("C",))


@pytest.mark.parametrize(
    "func,before,after",
    [
        (stackset.focus_up_stack, "A B* C", "A* B C"),
        (stackset.focus_up_stack, "A* B C", "A B C*"),
        (stackset.focus_up_stack, "A*", "A*"),
        (stackset.focus_down_stack, "A B* C", "A B C*"),
        (stackset.focus_down_stack, "A B C*", "A* B C"),
        (stackset.swap_up_stack, "A B* C", "B* A C"),
        (stackset.swap_up_stack, "A* B C", "B C A*"),
        (stackset.swap_down_stack, "A B* C", "A C B*"),
        (stackset.swap_down_stack, "A B C*", "C* A B"),
        (stackset.focus_master_stack, "A B C*", "A* B C"),
        (stackset.focus_master_stack, "A* B C", "A* B C"),
        (stackset.swap_master_stack, "A B C*", "C* B A"),
        (stackset.swap_master_stack, "A B* C", "B* A C"),
        (stackset.reverse_stack, "A B* C", "C B* A"),
    ],
)
def test_stack_operations(func, before, after):
    assert show_stack(func(make_stack(before))) == after


@pytest.mark.parametrize(
    "before,after",
    [
        ("A X* B", "A B*"),
        ("A B X*", "A B*"),
        ("A* X B", "A* B"),
        ("X*", ""),
    ],
)
def test_filter_stack(before, after):
    assert show_stack(stackset.filter_stack(lambda w: w != "X", make_stack(before))) == after


def test_new():
    s = stackset.new("tile", ["1", "2", "3"], ["left", "right"])
    assert stackset.current_tag(s) == "1"
    assert [screen.workspace.tag for screen in s.visible] == ["2"]
    assert s.visible[0].detail == "right"
    assert [ws.tag for ws in s.hidden] == ["3"]
    assert all(ws.layout == "tile" and ws.stack is None for ws in stackset.workspaces(s))


@pytest.mark.parametrize(
    "tags,screens",
    [
        ([], [None]),
        (["1", "1"], [None]),
        (["1"], []),
        (["1"], [None, None]),
    ],
)
def test_new_rejects_bad_arguments(tags, screens):
    with pytest.raises(StackSetError):
        stackset.new("tile", tags, screens)


def test_lookup():
    s = make_state({"1": "A* B", "2": "C", "3": ""})
    assert stackset.peek(s) == "A"
    assert stackset.index(s) == ["A", "B"]
    assert stackset.find_tag("C", s) == "2"
    assert stackset.find_tag("Z", s) is None
    assert stackset.member("B", s)
    assert not stackset.member("Z", s)
    assert stackset.tag_member("3", s)
    assert not stackset.tag_member("4", s)
    assert stackset.all_windows(s) == ["A", "B", "C"]
    assert stackset.peek(stackset.view("3", s)) is None


def test_view_hidden_round_trip():
    s = make_state({"1": "A", "2": "B", "3": "C", "4": "D"})
    viewed = stackset.view("3", s)
    assert stackset.current_tag(viewed) == "3"
    assert [ws.tag for ws in viewed.hidden] == ["2", "1", "4"]
    assert stackset.view("1", viewed) == s


def test_view_visible_round_trip():
    s = make_state({"1": "A", "2": "B", "3": "C"}, screens=3)
    viewed = stackset.view("3", s)
    assert stackset.current_tag(viewed) == "3"
    assert viewed.current.screen_id == 2
    assert [screen.workspace.tag for screen in viewed.visible] == ["2", "1"]
    assert stackset.view("1", viewed) == s


def test_view_unknown_or_current_tag():
    s = make_state({"1": "A", "2": "B"})
    assert stackset.view("1", s) is s
    assert stackset.view("nope", s) is s


def test_insert_up():
    s = make_state({"1": "A B* C", "2": ""})
    assert show("1", stackset.insert_up("X", s)) == "A X* B C"
    assert show("2", stackset.insert_up("X", stackset.view("2", s))) == "X*"


def test_insert_up_existing_window():
    s = make_state({"1": "A*", "2": "X"})
    assert stackset.insert_up("X", s) is s


def test_delete():
    s = make_state({"1": "A X* B", "2": "C"})
    assert show("1", stackset.delete("X", s)) == "A B*"
    assert stackset.delete("Z", s) is s


def test_delete_last_window():
    s = make_state({"1": "A", "2": "X"})
    assert workspace("2", stackset.delete("X", s)).stack is None


def test_delete_leaves_other_workspaces():
    s = make_state({"1": "A", "2": "X B*", "3": "C"})
    deleted = stackset.delete("X", s)
    assert workspace("1", deleted) == workspace("1", s)
    assert workspace("3", deleted) == workspace("3", s)


def test_modify():
    s = make_state({"1": "", "2": "A"})
    assert show("1", stackset.modify(Stack("Z"), lambda st: st, s)) == "Z*"
    assert stackset.modify_stack(stackset.focus_up_stack, s) == s


@pytest.mark.parametrize(
    "func,after",
    [
        (stackset.focus_up, "A* B C"),
        (stackset.focus_down, "A B C*"),
        (stackset.swap_up, "B* A C"),
        (stackset.swap_down, "A C B*"),
        (stackset.swap_master, "B* A C"),
        (stackset.focus_master, "A* B C"),
    ],
)
def test_current_stack_operations(func, after):
    s = make_state({"1": "A B* C"})
    assert show("1", func(s)) == after


def test_focus_window_other_workspace():
    s = make_state({"1": "A*", "2": "B C* D"})
    focused = stackset.focus_window("B", s)
    assert stackset.current_tag(focused) == "2"
    assert show("2", focused) == "B* C D"


def test_focus_window_noop():
    s = make_state({"1": "A* B"})
    assert stackset.focus_window("A", s) is s
    assert stackset.focus_window("Z", s) is s


def test_on_workspace_restores_current():
    s = make_state({"1": "A*", "2": "B"})
    changed = stackset.on_workspace("2", lambda ss: stackset.insert_up("X", ss), s)
    assert stackset.current_tag(changed) == "1"
    assert show("2", changed) == "X* B"
    assert show("1", changed) == "A*"


def test_shift_win():
    s = make_state({"1": "A X* B", "2": "C"})
    shifted = stackset.shift_win("2", "X", s)
    assert stackset.current_tag(shifted) == "1"
    assert show("1", shifted) == "A B*"
    assert show("2", shifted) == "X* C"


@pytest.mark.parametrize("tag,window", [("1", "X"), ("9", "X"), ("2", "Z")])
def test_shift_win_noop(tag, window):
    s = make_state({"1": "A X*", "2": "C"})
    assert stackset.shift_win(tag, window, s) is s
