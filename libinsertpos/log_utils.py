# Copyright (c) 2012 Florian Mounier
# Copyright (c) 2013-2014 Tao Sauvage
# Copyright (c) 2014 Sean Vig
# Copyright (c) 2014 roger
# Copyright (c) 2022 Matt Colligan
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

import sys
import typing
from logging import WARNING, FileHandler, Formatter, StreamHandler, getLogger

if typing.TYPE_CHECKING:
    from logging import Handler, Logger, LogRecord
    from pathlib import Path

logger = getLogger(__package__)

FORMAT = "%(asctime)s %(levelname)s %(name)s %(filename)s:%(funcName)s():L%(lineno)d %(message)s"


class ColorFormatter(Formatter):
    """Colours the level name of each record for terminal output."""

    colors = {
        "DEBUG": 34,
        "INFO": 32,
        "WARNING": 33,
        "ERROR": 31,
        "CRITICAL": 31,
    }

    def format(self, record: LogRecord) -> str:
        message = Formatter.format(self, record)
        color = self.colors.get(record.levelname)
        if color is None:
            return message
        return message.replace(record.levelname, f"\033[{color}m{record.levelname}\033[0m", 1)


def init_log(
    log_level: int = WARNING,
    log_path: Path | None = None,
    logger: Logger = logger,
) -> None:
    """
    Send the package log to stdout, or to log_path when given, replacing any
    handler set up by an earlier call.
    """
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    handler: Handler
    if log_path is None:
        handler = StreamHandler(sys.stdout)
        handler.setFormatter(ColorFormatter(FORMAT))
    else:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = FileHandler(log_path)
        handler.setFormatter(Formatter(FORMAT))

    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.debug("Logging placement decisions at level %s", log_level)
