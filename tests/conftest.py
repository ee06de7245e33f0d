import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers the CLI attaches so later tests do not write to closed streams."""
    yield
    package_logger = logging.getLogger("tfcopen")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
