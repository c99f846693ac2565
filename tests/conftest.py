import os

os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
from unittest.mock import patch

from tests.helpers import ControlledLoad


@pytest.fixture
def controlled_load():
    return ControlledLoad()


@pytest.fixture
def mock_loader_logger():
    with patch("pageloader.loaders.info_strategy.logger") as mock_logger:
        yield mock_logger
