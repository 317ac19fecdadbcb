"""Thread-safe bag of named values passed into and out of indexes."""

from __future__ import annotations

import threading
from typing import Any

from knowhere.params import Meta

_NUMBERS = (Meta.ROWS, Meta.DIM)
_STRINGS = (Meta.JSON_INFO, Meta.JSON_ID_SET)


def _field(key: str) -> property:
    if key in _NUMBERS:
        default: Any = 0
    elif key in _STRINGS:
        default = ""
    else:
        default = None

    def fget(self: DataSet) -> Any:
        return self.get(key, default)

    def fset(self: DataSet, value: Any) -> None:
        self.set(key, value)

    return property(fget, fset, doc=f"The value stored under {key!r}.")


class DataSet:
    """Named values such as the tensor, row count, ids and distances of a data set."""

    def __init__(self, is_owner: bool = True) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, Any] = {}
        self.is_owner = is_owner

    distance = _field(Meta.DISTANCE)
    lims = _field(Meta.LIMS)
    ids = _field(Meta.IDS)
    tensor = _field(Meta.TENSOR)
    rows = _field(Meta.ROWS)
    dim = _field(Meta.DIM)
    json_info = _field(Meta.JSON_INFO)
    json_id_set = _field(Meta.JSON_ID_SET)

    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any earlier value."""
        with self._lock:
            self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under *key*, or *default* when it is absent."""
        with self._lock:
            return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data


def gen_dataset(rows: int, dim: int, tensor: Any) -> DataSet:
    """Wrap an input tensor of *rows* vectors of *dim* components."""
    ds = DataSet(is_owner=False)
    ds.rows = rows
    ds.dim = dim
    ds.tensor = tensor
    return ds


def gen_ids_dataset(rows: int, ids: Any) -> DataSet:
    """Wrap *rows* ids."""
    ds = DataSet(is_owner=False)
    ds.rows = rows
    ds.ids = ids
    return ds


def gen_tensor_result_dataset(rows: int, dim: int, tensor: Any) -> DataSet:
    """Build a result holding a tensor of *rows* vectors of *dim* components."""
    ds = DataSet(is_owner=True)
    ds.rows = rows
    ds.dim = dim
    ds.tensor = tensor
    return ds


def gen_topk_result_dataset(nq: int, topk: int, ids: Any, distance: Any) -> DataSet:
    """Build a top-k search result for *nq* queries."""
    ds = DataSet(is_owner=True)
    ds.rows = nq
    ds.dim = topk
    ds.ids = ids
    ds.distance = distance
    return ds


def gen_range_result_dataset(nq: int, ids: Any, distance: Any, lims: Any) -> DataSet:
    """Build a range search result for *nq* queries delimited by *lims*."""
    ds = DataSet(is_owner=True)
    ds.rows = nq
    ds.ids = ids
    ds.distance = distance
    ds.lims = lims
    return ds


def gen_json_result_dataset(json_info: str, json_id_set: str) -> DataSet:
    """Build a result carrying JSON visit information and an id set."""
    ds = DataSet(is_owner=True)
    ds.json_info = json_info
    ds.json_id_set = json_id_set
    return ds