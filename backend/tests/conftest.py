"""Root conftest — shared test configuration."""

import os

import pytest

from app.core.descriptor import Descriptor
from app.core.descriptor_catalog import DATA_STRUCTURE_DATA

# Ensure tests never pick up a developer's descriptor file or log format
os.environ.setdefault("DESCRIPTORS_PATH", "")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def catalogue() -> list[Descriptor]:
    return list(DATA_STRUCTURE_DATA)
