import math

import pytest

from knowhere.config import BaseConfig, Config, Entry, FieldKind, ParamType
from knowhere.status import KnowhereError, Status


def test_base_defaults():
    cfg = BaseConfig()
    assert cfg.metric_type == "L2"
    assert cfg.k == 10
    assert cfg.num_build_thread is None
    assert cfg.radius == 0.0
    assert math.isinf(cfg.range_filter)
    assert cfg.trace_visit is False


def test_load_search_sets_values_and_defaults():
    cfg = BaseConfig()
    cfg.load({"k": 5, "metric_type": "IP", "trace_visit": True}, ParamType.SEARCH)
    assert cfg.k == 5
    assert cfg.metric_type == "IP"
    assert cfg.trace_visit is True
    assert cfg.for_tuning is False


def test_params_of_other_types_are_ignored():
    cfg = BaseConfig()
    cfg.load({"radius": "bad", "enable_mmap": 3}, ParamType.SEARCH)
    assert cfg.radius == 0.0
    assert cfg.enable_mmap is False


def test_allow_empty_without_default_skips():
    cfg = BaseConfig()
    cfg.load({}, ParamType.TRAIN)
    assert cfg.num_build_thread is None
    cfg.load({"num_build_thread": 1}, ParamType.TRAIN)
    assert cfg.num_build_thread == 1


def test_missing_required_param():
    cfg = Config()
    cfg.declare("nlist", FieldKind.INT).for_train()
    with pytest.raises(KnowhereError) as info:
        cfg.load({}, ParamType.TRAIN)
    assert info.value.status is Status.invalid_param_in_json
    assert info.value.message == "invalid param nlist"


def test_int_type_conflict_for_float_and_bool():
    for bad in (5.0, True, "5"):
        cfg = BaseConfig()
        with pytest.raises(KnowhereError) as info:
            cfg.load({"k": bad}, ParamType.SEARCH)
        assert info.value.status is Status.type_conflict_in_json
        assert info.value.message == "param k should be integer"


def test_int_overflow():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"k": 2**31}, ParamType.SEARCH)
    assert info.value.status is Status.arithmetic_overflow
    assert info.value.message == "param k should be at most 2147483647"


def test_int_out_of_range():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"k": 0}, ParamType.SEARCH)
    assert info.value.status is Status.out_of_range_in_json
    assert info.value.message == "param k out of range [ 1,2147483647 ]"


def test_float_accepts_int_and_rejects_string():
    cfg = BaseConfig()
    cfg.load({"radius": 2, "range_filter": 0.5}, ParamType.RANGE_SEARCH)
    assert cfg.radius == 2.0
    assert cfg.range_filter == 0.5
    with pytest.raises(KnowhereError) as info:
        cfg.load({"radius": "x"}, ParamType.RANGE_SEARCH)
    assert info.value.status is Status.type_conflict_in_json
    assert info.value.message == "param radius should be a number"


def test_float_range_and_overflow():
    cfg = Config()
    cfg.declare("r", FieldKind.FLOAT).set_range(0.0, 1.0).for_search()
    cfg.load({"r": 0.25}, ParamType.SEARCH)
    assert cfg.r == 0.25
    with pytest.raises(KnowhereError) as info:
        cfg.load({"r": 1e39}, ParamType.SEARCH)
    assert info.value.status is Status.arithmetic_overflow
    assert info.value.message == "param r should be at most 3.402823e+38"
    with pytest.raises(KnowhereError) as info:
        cfg.load({"r": 2.0}, ParamType.SEARCH)
    assert info.value.status is Status.out_of_range_in_json
    assert info.value.message.startswith("param r out of range")


def test_string_and_bool_type_conflicts():
    cfg = BaseConfig()
    with pytest.raises(KnowhereError) as info:
        cfg.load({"metric_type": 1}, ParamType.TRAIN)
    assert info.value.message == "param metric_type should be a string"
    with pytest.raises(KnowhereError) as info:
        cfg.load({"for_tuning": 1}, ParamType.SEARCH)
    assert info.value.status is Status.type_conflict_in_json
    assert info.value.message == "param for_tuning should be a boolean"


def test_list_field():
    cfg = Config()
    cfg.declare("levels", FieldKind.LIST).set_default([]).for_feder()
    cfg.load({}, ParamType.FEDER)
    assert cfg.levels == []
    cfg.load({"levels": [3, 1, 2]}, ParamType.FEDER)
    assert cfg.levels == [3, 1, 2]
    with pytest.raises(KnowhereError) as info:
        cfg.load({"levels": 3}, ParamType.FEDER)
    assert info.value.message == "param levels should be an array"


def test_entry_builder_chain():
    entry = Entry(FieldKind.INT)
    result = entry.set_default(4).set_range(1, 8).description("d").for_train_and_search().for_feder()
    assert result is entry
    assert entry.value == 4 and entry.default == 4
    assert entry.range == (1, 8)
    assert entry.desc == "d"
    assert entry.param_type == (
        ParamType.TRAIN | ParamType.SEARCH | ParamType.RANGE_SEARCH | ParamType.FEDER
    )


def test_attribute_assignment_updates_entry():
    cfg = BaseConfig()
    cfg.k = 42
    assert cfg.entries["k"].value == 42
    with pytest.raises(AttributeError):
        _ = cfg.undeclared


def test_check_hooks_leave_config_unchanged():
    cfg = BaseConfig()
    cfg.check_and_adjust_for_search()
    cfg.check_and_adjust_for_range_search()
    cfg.check_and_adjust_for_build()
    assert cfg.k == 10
    assert cfg.metric_type == "L2"