# knowhere

Building blocks for a vector search engine, in plain Python with numpy:

- `knowhere.status`: the `Status` codes, the `KnowhereError` exception that
  carries one, and `ensure()` for checks that must hold.
- `knowhere.params`: index type names (`IndexEnum`), dataset keys (`Meta`),
  index parameter names (`IndexParam`) and metric names (`Metric`), with
  `is_metric_type()` for case-insensitive comparison.
- `knowhere.config`: declarative configurations. `BaseConfig` declares
  `metric_type`, `k`, `num_build_thread`, `radius`, `range_filter`,
  `trace_visit`, `enable_mmap` and `for_tuning`. `Config.load()` fills the
  fields used by a given `ParamType` (train, search, range search and so on)
  from a JSON-style dict, applying defaults and checking types and ranges.
  Fields are read and written as attributes of the config.
- `knowhere.dataset`: `DataSet`, a thread-safe bag of named values with
  `rows`, `dim`, `tensor`, `ids`, `distance`, `lims`, `json_info` and
  `json_id_set` properties, plus the `gen_*` helpers that build input and
  result datasets.
- `knowhere.binaryset`: `Binary` and `BinarySet`, the named blobs of a
  serialized index.
- `knowhere.bitset`: `BitsetView`, a read-only bitmap over bytes, least
  significant bit first.
- `knowhere.distances`: squared L2, inner product, L1, L-infinity, squared
  norm, one-to-many distances (`l2sqr_ny`, `inner_products_ny`), and fused
  multiply-add (`madd`, `madd_and_argmin`), all over float32.
- `knowhere.utils`: `hash_vec()`, `hash_binary_vec()` and `round_down()`.
- `knowhere.thread_pool`: `ThreadPool`, whose `push()` returns a
  `concurrent.futures.Future` and blocks while the backlog is full, and a
  process-wide pool via `init_global_thread_pool()` and
  `get_global_thread_pool()`.
- `knowhere.blocking_queue`: a bounded `BlockingQueue` (capacity 32 by
  default).
- `knowhere.file_manager`: the `FileManager` interface, a `LocalFileManager`
  that only keeps track of file names, and `Pack`, which carries a file
  manager.
- `knowhere.feder`: visit and meta records for HNSW (`knowhere.feder.hnsw`),
  IVF-Flat (`knowhere.feder.ivfflat`) and DiskANN (`knowhere.feder.diskann`),
  each with `to_dict()` / `from_dict()`.

## Install

```
pip install .
```

## Examples

Load a search configuration:

```python
from knowhere.config import BaseConfig, ParamType

cfg = BaseConfig()
cfg.load({"metric_type": "IP", "k": 5}, ParamType.SEARCH)
cfg.k            # 5
cfg.trace_visit  # False (the default)
```

A value of the wrong type or out of range raises `KnowhereError`; its
`status` attribute tells which check failed, for example
`Status.out_of_range_in_json` for `{"k": 0}`.

Compute distances:

```python
from knowhere.distances import l2sqr, l2sqr_ny, madd_and_argmin

l2sqr([0.0, 0.0], [3.0, 4.0])                    # 25.0
l2sqr_ny([0.0, 0.0], [[1.0, 0.0], [3.0, 4.0]])   # array([ 1., 25.], dtype=float32)
c, i = madd_and_argmin([3.0, 1.0, 2.0], 1.0, [0.0, 0.0, 0.0])  # i == 1
```

Filter with a bitset:

```python
from knowhere.bitset import BitsetView

view = BitsetView(bytes([0b00000101]), 8)
view.test(0)           # True
view.count()           # 2
view.to_string(0, 8)   # "10100000"
```

## What this package does not do

There are no index implementations here: nothing builds, trains, searches
or serializes an index, and there is no top-k result heap. The package
provides the configuration, data, distance and record types such indexes
would use. `LocalFileManager` never touches the disk, and there is no
command-line program.

## Tests

```
pip install ".[test]"
pytest
```