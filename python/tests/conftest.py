"""Pytest configuration and fixtures."""

import pytest
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from lgdict.schema import Connector, ConnectorSet, Direction


def make_set(germ: str, *connectors: tuple[str, str]) -> ConnectorSet:
    """Helper to build a connector set from (partner, marker) pairs."""
    return ConnectorSet(
        germ=germ,
        connectors=tuple(
            Connector(partner, Direction.parse(marker))
            for partner, marker in connectors
        ),
    )


@pytest.fixture
def dog_record():
    """The dog connector set: "the" on the left, "barks" on the right."""
    return make_set("dog", ("the", "-"), ("barks", "+"))


@pytest.fixture
def sample_records(dog_record):
    """A small corpus where "the" reuses the (the, dog) link."""
    return [
        dog_record,
        make_set("the", ("dog", "+")),
        make_set("barks", ("dog", "-")),
    ]


@pytest.fixture
def sample_jsonl_content():
    """Sample JSON Lines connector sets."""
    return """# connector sets
{"germ": "dog", "connectors": [{"partner": "the", "direction": "-"}, {"partner": "barks", "direction": "+"}]}

{"germ": "the", "connectors": [{"partner": "dog", "direction": "right"}]}
{"germ": "###LEFT-WALL###", "connectors": [{"partner": "dog", "direction": "+"}]}
"""
