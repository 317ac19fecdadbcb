import pytest

from knowhere.params import IndexEnum, IndexParam, Meta, Metric, is_metric_type


@pytest.mark.parametrize("text", ["l2", "L2", "l2".upper()])
def test_is_metric_type_ignores_case(text):
    assert is_metric_type(text, Metric.L2) is True


def test_is_metric_type_rejects_other_metric():
    assert is_metric_type("ip", Metric.L2) is False
    assert is_metric_type("cosine", Metric.COSINE) is True


def test_is_metric_type_rejects_prefix():
    assert is_metric_type("L", Metric.L2) is False


def test_names_fixed_by_source_compare_case_insensitively():
    assert is_metric_type("hnsw", IndexEnum.INDEX_HNSW) is True
    assert is_metric_type("K", Meta.TOPK) is True
    assert is_metric_type("EFCONSTRUCTION", IndexParam.EFCONSTRUCTION) is True
    assert is_metric_type("ef", IndexParam.EFCONSTRUCTION) is False