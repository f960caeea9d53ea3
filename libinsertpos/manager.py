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
from __future__ import annotations

from typing import TYPE_CHECKING

from libinsertpos import stackset
from libinsertpos.log_utils import logger

if TYPE_CHECKING:
    from libinsertpos.config import Config
    from libinsertpos.stackset import StackSet, Window


def manage(config: Config, window: Window, s: StackSet) -> StackSet:
    """
    Take a new window into the state: it is inserted above the focus of the
    current workspace and then handed to the configured manage hook.
    """
    if stackset.member(window, s):
        logger.warning("Window %r is already managed", window)
        return s

    logger.debug("Managing window %r on workspace %s", window, stackset.current_tag(s))
    return config.manage_hook(window)(stackset.insert_up(window, s))


def manage_all(config: Config, windows, s: StackSet) -> StackSet:
    """Manage several windows in order, as when windows already exist at startup."""
    for window in windows:
        s = manage(config, window, s)
    return s
