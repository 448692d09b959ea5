"""
Tests for the runtime dataclass validation helpers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

import pytest

from roadgraph.utils.validation import DataclassRule, validate_dataclass


class Colour(Enum):
    RED = "red"


@validate_dataclass
@dataclass
class Sample:
    name: str
    count: int = 0
    tags: List[str] = None
    scores: Dict[str, float] = None
    pair: Tuple[int, int] = (0, 0)
    items: Tuple[str, ...] = ()
    colour: Optional[Colour] = None

    def __post_init__(self):
        if self.tags is None:
            self.tags = []
        if self.scores is None:
            self.scores = {}


def test_valid_instance():
    """Test that matching values pass validation."""
    sample = Sample("a", 1, ["x"], {"k": 1.0}, (1, 2), ("p", "q"), Colour.RED)
    assert DataclassRule(Sample).validate(sample)


@pytest.mark.parametrize(
    "kwargs, field_name",
    [
        ({"name": 1}, "name"),
        ({"name": "a", "count": True}, "count"),
        ({"name": "a", "tags": [1]}, "tags"),
        ({"name": "a", "scores": {"k": "high"}}, "scores"),
        ({"name": "a", "pair": (1,)}, "pair"),
        ({"name": "a", "items": ("p", 2)}, "items"),
        ({"name": "a", "colour": "red"}, "colour"),
    ],
)
def test_invalid_field_reported(kwargs, field_name):
    """Test that each mistyped field is named in the error."""
    with pytest.raises(TypeError, match=f"Invalid field types in Sample: {field_name}"):
        Sample(**kwargs)


def test_post_init_runs_before_type_check():
    """Test that the class's own __post_init__ normalises values first."""
    sample = Sample("a")
    assert sample.tags == []
    assert sample.scores == {}
