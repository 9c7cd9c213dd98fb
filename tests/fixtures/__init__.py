"""Test fixtures: a deterministic NLP oracle and page builders."""

from tests.fixtures.oracle import STOP_WORDS, StubOracle, full_oracle
from tests.fixtures.pages import (
    COMPOST_BODY,
    GOOD_DESCRIPTION,
    GOOD_TITLE,
    complete_meta,
    make_page,
)

__all__ = [
    # Oracle
    "STOP_WORDS",
    "StubOracle",
    "full_oracle",
    # Pages
    "COMPOST_BODY",
    "GOOD_DESCRIPTION",
    "GOOD_TITLE",
    "complete_meta",
    "make_page",
]
