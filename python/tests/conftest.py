"""Shared fixtures for xml_dispatcher tests."""

import pytest
from pydantic import BaseModel

from xml_dispatcher.common.handler.root_element import RootElementHandler


class Tally(BaseModel):
    count: int = 0


class TallyHandler(RootElementHandler):
    """Handles <tally> documents; a non-numeric <count> fails to decode."""

    root_tag = "tally"
    record_model = Tally
    record_shape = {"count": "tally.count"}


@pytest.fixture
def tally_handler():
    """Create a handler whose record has an integer field."""
    return TallyHandler()
