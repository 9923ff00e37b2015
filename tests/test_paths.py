from dataclasses import dataclass
from typing import Optional

import pytest

from firefluent.paths import path, path_camel_case, paths, paths_camel_case, to_camel_case


@dataclass
class TestStructure:
    some_id: str
    one_more_string: str
    some_num: int


@dataclass
class Inner:
    some_value: int


@dataclass
class Outer:
    inner: Optional[Inner]
    label: str


class Annotated:
    some_field: str


def test_paths_matches_individual_paths():
    result = paths(TestStructure, "some_id", "one_more_string", "some_num")
    assert result == [
        path(TestStructure, "some_id"),
        path(TestStructure, "one_more_string"),
        path(TestStructure, "some_num"),
    ]
    assert result == ["some_id", "one_more_string", "some_num"]


def test_unknown_field_is_rejected():
    with pytest.raises(ValueError):
        path(TestStructure, "missing")


def test_nested_path_through_optional():
    assert path(Outer, "inner.some_value") == "inner.some_value"
    with pytest.raises(ValueError):
        path(Outer, "inner.nothing")


def test_plain_class_annotations_are_checked():
    assert path(Annotated, "some_field") == "some_field"
    with pytest.raises(ValueError):
        path(Annotated, "other")


def test_unchecked_segments_are_joined():
    assert path("a", "b").split(".") == ["a", "b"]


def test_empty_segment_and_no_names_raise():
    with pytest.raises(ValueError):
        path("a..b")
    with pytest.raises(ValueError):
        path(TestStructure)
    with pytest.raises(ValueError):
        paths(TestStructure)


def test_non_string_name_raises():
    with pytest.raises(TypeError):
        path(TestStructure, 3)


def test_camel_case_conversion():
    assert to_camel_case("some_id") == "someId"
    assert to_camel_case("someId") == "someId"
    assert "_" not in to_camel_case("a_b_c_d")


def test_path_camel_case():
    assert path_camel_case(TestStructure, "one_more_string") == "oneMoreString"
    assert paths_camel_case(Outer, "inner.some_value", "label") == [
        "inner.someValue",
        "label",
    ]