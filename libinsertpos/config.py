# Copyright (c) 2012-2015 Tycho Andersen
# Copyright (c) 2013 xarvh
# Copyright (c) 2013 horsik
# Copyright (c) 2013-2014 roger
# Copyright (c) 2013 Tao Sauvage
# Copyright (c) 2014 ramnes
# Copyright (c) 2014 Sean Vig
# Copyright (c) 2014 Adi Sieker
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
#
from __future__ import annotations

from typing import TYPE_CHECKING

from libinsertpos import hook, stackset
from libinsertpos.utils import ConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from typing import Any

    from libinsertpos.hook import ManageHook
    from libinsertpos.stackset import StackSet

DEFAULT_WORKSPACES = tuple(str(i) for i in range(1, 10))


class Config:
    """
    The part of the window manager configuration new windows go through.

    Parameters
    ==========
    workspaces:
        Workspace tags, in order. The first ones are put on the screens.
    layout:
        Layout descriptor given to every workspace. It is never looked at
        here.
    screens:
        One entry of screen detail per screen.
    manage_hook:
        Manage hook run for every new window, see :mod:`libinsertpos.hook`.
    """

    def __init__(
        self,
        workspaces: Iterable[str] = DEFAULT_WORKSPACES,
        layout: Any = "tile",
        screens: Iterable[Any] = (None,),
        manage_hook: ManageHook | None = None,
    ) -> None:
        if isinstance(workspaces, str):
            raise ConfigError(f"workspaces must be a sequence of tags, got {workspaces!r}")
        self.workspaces = tuple(workspaces)
        self.layout = layout
        self.screens = tuple(screens)
        self.manage_hook = hook.id_hook if manage_hook is None else manage_hook

        if not self.workspaces:
            raise ConfigError("At least one workspace is required")
        if len(set(self.workspaces)) != len(self.workspaces):
            raise ConfigError(f"Duplicate workspace tags: {self.workspaces}")
        if not self.screens:
            raise ConfigError("At least one screen is required")
        if len(self.screens) > len(self.workspaces):
            raise ConfigError(
                f"{len(self.screens)} screens but only {len(self.workspaces)} workspaces"
            )

    def replace(self, **changes: Any) -> Config:
        """Return a copy of this config with some settings changed."""
        settings = dict(
            workspaces=self.workspaces,
            layout=self.layout,
            screens=self.screens,
            manage_hook=self.manage_hook,
        )
        unknown = set(changes) - set(settings)
        if unknown:
            raise ConfigError(f"Unknown config settings: {', '.join(sorted(unknown))}")
        settings.update(changes)
        return Config(**settings)

    def initial_state(self) -> StackSet:
        """Window manager state before any window has appeared."""
        return stackset.new(self.layout, self.workspaces, self.screens)

    def __repr__(self) -> str:
        return f"<Config workspaces={list(self.workspaces)} screens={len(self.screens)}>"
