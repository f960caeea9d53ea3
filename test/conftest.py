import logging

import pytest

from libinsertpos.log_utils import init_log, logger
from test.helpers import make_state


def pytest_addoption(parser):
    parser.addoption("--debuglog", action="store_true", default=False, help="enable debug output")


@pytest.fixture(autouse=True)
def debuglog(request):
    if request.config.getoption("--debuglog"):
        init_log(logging.DEBUG)
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)


@pytest.fixture
def two_workspaces():
    """Workspace 1 displayed with A focused over B, workspace 2 hidden."""
    return make_state({"1": "A* B", "2": "C"})
