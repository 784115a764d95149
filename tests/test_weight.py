import math

import pytest

from growing_dags.weight import (
    EmptyTupleDataFactory,
    LogWeightDataFactory,
    WeightDataFactory,
)


def test_empty_tuple_factory_yields_no_data():
    factory = EmptyTupleDataFactory()
    assert factory.from_strs(4, []) is None
    assert factory.length == 0
    assert factory.description == "nothing following"


def test_weight_factory_parses_value():
    assert WeightDataFactory().from_strs(0, ["0.683"]) == 0.683


def test_weight_factory_parses_exponent():
    assert WeightDataFactory().from_strs(0, ["5e-1"]) == 0.5


def test_weight_factory_reports_line_and_text():
    with pytest.raises(ValueError, match="Line 3 has an invalid weight abc"):
        WeightDataFactory().from_strs(3, ["abc"])


@pytest.mark.parametrize("text", [" 0.5", "0.5 ", "1_0", ""])
def test_weight_factory_rejects_loose_numbers(text):
    with pytest.raises(ValueError):
        WeightDataFactory().from_strs(1, [text])


def test_weight_factory_shape():
    factory = WeightDataFactory()
    assert factory.length == 1
    assert factory.description == "weight"
    assert factory.default == 0.0


def test_log_weight_shares_shape_with_weight():
    log_factory = LogWeightDataFactory()
    assert log_factory.length == 1
    assert log_factory.description == "weight"
    with pytest.raises(ValueError, match="Line 5 has an invalid weight bad"):
        log_factory.from_strs(5, ["bad"])


def test_log_weight_of_ln10_is_zero():
    assert LogWeightDataFactory().from_strs(0, [repr(math.log(10.0))]) == 0.0


def test_log_weight_clamps_small_values():
    factory = LogWeightDataFactory()
    floor = factory.from_strs(0, ["0.000000001"])
    assert factory.from_strs(0, ["0"]) == floor
    assert factory.from_strs(0, ["-3"]) == floor
    assert factory.from_strs(0, ["nan"]) == floor


def test_log_weight_higher_is_cheaper():
    factory = LogWeightDataFactory()
    costs = [factory.from_strs(0, [text]) for text in ["0.1", "0.5", "0.9"]]
    assert costs == sorted(costs, reverse=True)
    assert len(set(costs)) == 3


def test_log_weight_propagates_parse_errors():
    with pytest.raises(ValueError, match="invalid weight x"):
        LogWeightDataFactory().from_strs(2, ["x"])