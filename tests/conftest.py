"""
Pytest configuration for delta_render
"""

import logging
import sys

import pytest


@pytest.fixture(autouse=True)
def configure_logging():
    """Reset logging for every test so CLI handlers do not leak between tests."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(name)s - %(levelname)s - %(message)s"))

    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.WARNING)

    yield

    root_logger.handlers.clear()
    package_logger = logging.getLogger("delta_render")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


def ops(*items):
    """Shorthand: build a Delta mapping from ops."""
    return {"ops": list(items)}


@pytest.fixture
def make_delta():
    return ops


@pytest.fixture
def temp_dir(tmp_path):
    return tmp_path
