import pytest

from pycircfit import set_config, set_logger


@pytest.fixture(autouse=True)
def reset_package_state():
    yield
    set_config(None)
    set_logger(None)
