" generic fixtures "
import logging
import tomllib
from copy import deepcopy
from pathlib import Path

import pytest

from helptree.commands.tree import build_command_tree
from helptree.config import Configuration
from helptree.schema import HELPTREE_SCHEMA

from .testtools import RecordingCaller

SAMPLE_CONFIG = Path(__file__).parent / "sample_config.toml"

with SAMPLE_CONFIG.open("rb") as f:
    CONFIG_1 = tomllib.load(f)


def pytest_configure():
    "Runs once before all"
    from helptree.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@pytest.fixture
def test_logger():
    return logging.getLogger("tests")


@pytest.fixture
def sample_config(test_logger):
    return Configuration(deepcopy(CONFIG_1["helptree"]), logger=test_logger, schema=HELPTREE_SCHEMA)


@pytest.fixture
def sample_tree(test_logger):
    return build_command_tree(deepcopy(CONFIG_1["commands"]), test_logger)


@pytest.fixture
def console():
    "A non-interactive caller without permissions"
    return RecordingCaller()


@pytest.fixture
def player():
    "An interactive caller without permissions"
    return RecordingCaller(interactive=True)
