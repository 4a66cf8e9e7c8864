import pytest
from pydantic import BaseModel, Field, ValidationError

from similarity_service.services.similarity.errors import (
    MissingParameterError,
    ParameterRangeError,
    ParameterTypeError,
    SimilarityConfigError,
)
from similarity_service.services.similarity.params import (
    ParameterBag,
    flatten_settings,
    group_settings,
    parameter_error,
)


def test_flatten_settings_mixes_nested_and_dotted_keys() -> None:
    settings = {
        "index": {
            "number_of_shards": 1,
            "similarity": {"my_sim": {"type": "DFR", "normalization.h2.c": 3}},
        },
        "index.similarity.my_sim.normalization": "h2",
    }
    assert flatten_settings(settings) == {
        "index.number_of_shards": 1,
        "index.similarity.my_sim.type": "DFR",
        "index.similarity.my_sim.normalization.h2.c": 3,
        "index.similarity.my_sim.normalization": "h2",
    }


def test_group_settings_splits_per_name_and_ignores_other_keys() -> None:
    groups = group_settings(
        {
            "index.number_of_shards": 1,
            "index.similarity.a.type": "BM25",
            "index.similarity.a.k1": 2.0,
            "index.similarity.b.type": "DFR",
            "index.similarity.b.normalization.h2.c": 3,
        }
    )
    assert groups == {
        "a": {"type": "BM25", "k1": 2.0},
        "b": {"type": "DFR", "normalization.h2.c": 3},
    }


@pytest.mark.parametrize("key", ["index.similarity.a", "index.similarity..type", "index.similarity.a."])
def test_group_settings_rejects_keys_without_name_and_parameter(key: str) -> None:
    with pytest.raises(SimilarityConfigError):
        group_settings({key: "BM25"})


def test_get_returns_default_for_missing_or_null_key() -> None:
    bag = ParameterBag("s", {"k1": None})
    assert bag.get("k1", float, 1.2) == 1.2
    assert bag.get("b", float, 0.75) == 0.75
    assert bag.get("b", float) is None
    assert "k1" not in bag
    assert bag.keys() == []


@pytest.mark.parametrize("raw, expected", [(2, 2.0), (2.5, 2.5), ("3", 3.0), ("0.7", 0.7), ("1e3", 1000.0)])
def test_get_float_coerces_numbers_and_numeric_strings(raw, expected) -> None:
    assert ParameterBag("s", {"x": raw}).get("x", float, 0.0) == expected


@pytest.mark.parametrize("raw", ["abc", [1.0], ""])
def test_get_float_rejects_non_numeric_values(raw) -> None:
    with pytest.raises(ParameterTypeError) as exc_info:
        ParameterBag("my_sim", {"k1": raw}).get("k1", float, 1.2)
    assert exc_info.value.key == "k1"
    assert exc_info.value.scope == "my_sim"
    assert exc_info.value.expected_type is float


@pytest.mark.parametrize(
    "raw, expected",
    [
        (True, True),
        (False, False),
        ("false", False),
        ("TRUE", True),
        ("0", False),
        ("on", True),
        ("no", False),
        (1, True),
        (0, False),
    ],
)
def test_get_bool_accepts_booleans_boolean_strings_and_zero_or_one(raw, expected) -> None:
    assert ParameterBag("s", {"flag": raw}).get("flag", bool, not expected) is expected


@pytest.mark.parametrize("raw", ["maybe", 2, -1, "2"])
def test_get_bool_rejects_other_values(raw) -> None:
    with pytest.raises(ParameterTypeError):
        ParameterBag("s", {"flag": raw}).get("flag", bool, True)


def test_get_int_requires_integral_value() -> None:
    bag = ParameterBag("s", {"a": "4", "b": 4.0, "c": 4.5})
    assert bag.get("a", int) == 4
    assert bag.get("b", int) == 4
    with pytest.raises(ParameterTypeError):
        bag.get("c", int)


def test_get_str_reads_codes() -> None:
    bag = ParameterBag("s", {"basic_model": "g", "odd": 3, "flag": True})
    assert bag.get("basic_model", str) == "g"
    for key in ("odd", "flag"):
        with pytest.raises(ParameterTypeError):
            bag.get(key, str)


def test_require_raises_for_missing_key() -> None:
    with pytest.raises(MissingParameterError) as exc_info:
        ParameterBag("my_sim", {}).require("lambda", float)
    assert exc_info.value.key == "lambda"
    assert "my_sim" in str(exc_info.value)


def test_section_scopes_keys_under_prefix() -> None:
    bag = ParameterBag(
        "my_sim",
        {"normalization": "h2", "normalization.h2.c": 3, "normalization.h1.c": 5, "normalization.h22.c": 7},
    )
    section = bag.section("normalization.h2")
    assert section.scope == "my_sim.normalization.h2"
    assert section.as_dict() == {"c": 3}


def test_bag_is_read_only() -> None:
    values = {"k1": 1.0}
    bag = ParameterBag("s", values)
    values["k1"] = 5.0
    assert bag.get("k1", float, 0.0) == 1.0
    with pytest.raises(TypeError):
        bag._values["k1"] = 2.0  # type: ignore[index]


def test_unsupported_type_is_a_programming_error() -> None:
    with pytest.raises(TypeError):
        ParameterBag("s", {"x": 1}).get("x", list)


def test_pick_returns_present_raw_values() -> None:
    bag = ParameterBag("s", {"k1": "2", "b": None, "other": 1})
    assert bag.pick("k1", "b", "discount_overlaps") == {"k1": "2"}


class Window(BaseModel):
    label: str
    size: float = Field(default=1.0, gt=0, allow_inf_nan=False)


def _translate(**values):
    with pytest.raises(ValidationError) as exc_info:
        Window.model_validate(values)
    return parameter_error("my_sim", exc_info.value, {"label": str, "size": float})


def test_parameter_error_maps_pydantic_errors() -> None:
    missing = _translate(size=2.0)
    assert isinstance(missing, MissingParameterError)
    assert missing.key == "label"

    below = _translate(label="a", size=-1)
    assert isinstance(below, ParameterRangeError)
    assert (below.scope, below.key, below.domain) == ("my_sim", "size", "> 0")

    infinite = _translate(label="a", size="inf")
    assert isinstance(infinite, ParameterRangeError)
    assert infinite.domain == "a finite number"

    wrong = _translate(label="a", size="wide")
    assert isinstance(wrong, ParameterTypeError)
    assert wrong.expected_type is float
