"""Declarative parameter configurations loaded and validated from JSON objects."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Any, Mapping

from knowhere.status import KnowhereError, Status

_log = logging.getLogger("knowhere")

INT32_MAX = 2**31 - 1
FLOAT32_MAX = 3.4028234663852886e38
DEFAULT_RANGE_FILTER = math.inf


class ParamType(IntFlag):
    """Operations a parameter applies to."""

    TRAIN = 1 << 0
    SEARCH = 1 << 1
    RANGE_SEARCH = 1 << 2
    FEDER = 1 << 3
    DESERIALIZE = 1 << 4
    DESERIALIZE_FROM_FILE = 1 << 5


class FieldKind(Enum):
    """Value type of a configuration field."""

    STRING = "string"
    FLOAT = "float"
    INT = "int"
    LIST = "list"
    BOOL = "bool"


@dataclass
class Entry:
    """A declared configuration field; its builder methods return the entry itself."""

    kind: FieldKind
    value: Any = None
    default: Any = None
    param_type: ParamType = ParamType(0)
    range: tuple[Any, Any] | None = None
    desc: str | None = None
    allow_empty_without_default: bool = False

    def set_default(self, value: Any) -> Entry:
        self.default = value
        self.value = value
        return self

    def set_range(self, low: Any, high: Any) -> Entry:
        self.range = (low, high)
        return self

    def allow_empty(self) -> Entry:
        """Let the field be absent from JSON even though it has no default."""
        self.allow_empty_without_default = True
        return self

    def description(self, desc: str) -> Entry:
        self.desc = desc
        return self

    def for_train(self) -> Entry:
        self.param_type |= ParamType.TRAIN
        return self

    def for_search(self) -> Entry:
        self.param_type |= ParamType.SEARCH
        return self

    def for_range_search(self) -> Entry:
        self.param_type |= ParamType.RANGE_SEARCH
        return self

    def for_feder(self) -> Entry:
        self.param_type |= ParamType.FEDER
        return self

    def for_deserialize(self) -> Entry:
        self.param_type |= ParamType.DESERIALIZE
        return self

    def for_deserialize_from_file(self) -> Entry:
        self.param_type |= ParamType.DESERIALIZE_FROM_FILE
        return self

    def for_train_and_search(self) -> Entry:
        self.param_type |= ParamType.TRAIN | ParamType.SEARCH | ParamType.RANGE_SEARCH
        return self


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _fail(status: Status, log_message: str, message: str) -> None:
    _log.error(log_message)
    raise KnowhereError(status, message)


def _range_text(entry: Entry) -> str:
    low, high = entry.range
    if entry.kind is FieldKind.INT:
        return f"[ {int(low)},{int(high)} ]"
    return f"[ {float(low):f},{float(high):f} ]"


class Config:
    """A set of declared fields whose values are read as attributes."""

    def __init__(self) -> None:
        object.__setattr__(self, "entries", {})

    def __getattr__(self, name: str) -> Any:
        entries = self.__dict__.get("entries", {})
        if name in entries:
            return entries[name].value
        raise AttributeError(name)

    def __setattr__(self, name: str, value: Any) -> None:
        entries = self.__dict__.get("entries", {})
        if name in entries:
            entries[name].value = value
        else:
            object.__setattr__(self, name, value)

    def declare(self, name: str, kind: FieldKind) -> Entry:
        """Declare a field named *name* of *kind* and return its entry."""
        entry = Entry(FieldKind(kind))
        self.entries[name] = entry
        return entry

    def load(self, json: Mapping[str, Any], param_type: ParamType) -> None:
        """Fill the fields used by *param_type* from *json*, raising ``KnowhereError`` on bad input."""
        for name, entry in self.entries.items():
            if not (param_type & entry.param_type):
                continue
            if name not in json:
                if entry.default is None:
                    if entry.allow_empty_without_default:
                        continue
                    _fail(Status.invalid_param_in_json, f"Invalid param [{name}] in json.", f"invalid param {name}")
                entry.value = entry.default
                continue
            entry.value = self._convert(name, entry, json[name])

    def _check_ranges(self, param_type: ParamType) -> None:
        """Raise ``KnowhereError`` if a set field used by *param_type* lies outside its range."""
        for name, entry in self.entries.items():
            if not (param_type & entry.param_type) or entry.range is None or entry.value is None:
                continue
            low, high = entry.range
            if not low <= entry.value <= high:
                _fail(
                    Status.out_of_range_in_json,
                    f"Out of range: param [{name}] should be in [{low}, {high}].",
                    f"param {name} out of range {_range_text(entry)}",
                )

    @staticmethod
    def _convert(name: str, entry: Entry, raw: Any) -> Any:
        kind = entry.kind
        if kind is FieldKind.INT:
            if not _is_int(raw):
                _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be integer.",
                    f"param {name} should be integer",
                )
            if entry.range is not None:
                if raw > INT32_MAX:
                    _fail(
                        Status.arithmetic_overflow,
                        f"Arithmetic overflow: param [{name}] should be at most {INT32_MAX}",
                        f"param {name} should be at most 2147483647",
                    )
                low, high = entry.range
                if not low <= raw <= high:
                    _fail(
                        Status.out_of_range_in_json,
                        f"Out of range in json: param [{name}] should be in [{low}, {high}].",
                        f"param {name} out of range {_range_text(entry)}",
                    )
            return int(raw)
        if kind is FieldKind.FLOAT:
            if not _is_number(raw):
                _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be a number.",
                    f"param {name} should be a number",
                )
            if entry.range is not None:
                if raw > FLOAT32_MAX:
                    _fail(
                        Status.arithmetic_overflow,
                        f"Arithmetic overflow: param [{name}] should be at most {FLOAT32_MAX:e}",
                        f"param {name} should be at most 3.402823e+38",
                    )
                low, high = entry.range
                if not low <= raw <= high:
                    _fail(
                        Status.out_of_range_in_json,
                        f"Out of range in json: param [{name}] should be in [{low}, {high}].",
                        f"param {name} out of range {_range_text(entry)}",
                    )
            return float(raw)
        if kind is FieldKind.STRING:
            if not isinstance(raw, str):
                _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be a string.",
                    f"param {name} should be a string",
                )
            return raw
        if kind is FieldKind.LIST:
            if not isinstance(raw, (list, tuple)) or not all(_is_number(item) for item in raw):
                _fail(
                    Status.type_conflict_in_json,
                    f"Type conflict in json: param [{name}] should be an array.",
                    f"param {name} should be an array",
                )
            return [int(item) for item in raw]
        if not isinstance(raw, bool):
            _fail(
                Status.type_conflict_in_json,
                f"Type conflict in json: param [{name}] should be a boolean.",
                f"param {name} should be a boolean",
            )
        return raw


class BaseConfig(Config):
    """Parameters common to every index."""

    def __init__(self) -> None:
        super().__init__()
        self.declare("metric_type", FieldKind.STRING).set_default("L2").description(
            "metric type"
        ).for_train_and_search()
        self.declare("k", FieldKind.INT).set_default(10).description(
            "search for top k similar vector."
        ).set_range(1, INT32_MAX).for_search()
        self.declare("num_build_thread", FieldKind.INT).description(
            "index thread limit for build."
        ).allow_empty().set_range(1, os.cpu_count() or 1).for_train()
        self.declare("radius", FieldKind.FLOAT).set_default(0.0).description(
            "radius for range search"
        ).for_range_search()
        self.declare("range_filter", FieldKind.FLOAT).set_default(DEFAULT_RANGE_FILTER).description(
            "result filter for range search"
        ).for_range_search()
        self.declare("trace_visit", FieldKind.BOOL).set_default(False).description(
            "trace visit for feder"
        ).for_search().for_range_search()
        self.declare("enable_mmap", FieldKind.BOOL).set_default(False).description(
            "enable mmap for load index"
        ).for_deserialize_from_file()
        self.declare("for_tuning", FieldKind.BOOL).set_default(False).description("for tuning").for_search()

    def check_and_adjust_for_search(self) -> None:
        """Check that the search parameters lie within their declared ranges."""
        self._check_ranges(ParamType.SEARCH)

    def check_and_adjust_for_range_search(self) -> None:
        """Check that the range-search parameters lie within their declared ranges."""
        self._check_ranges(ParamType.RANGE_SEARCH)

    def check_and_adjust_for_build(self) -> None:
        """Check that the build parameters lie within their declared ranges."""
        self._check_ranges(ParamType.TRAIN)