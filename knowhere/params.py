"""Index type names, metadata keys, index parameter names and metric names."""

from __future__ import annotations

from typing import Final


class IndexEnum:
    """Names of the supported index types."""

    INVALID: Final = ""
    INDEX_FAISS_BIN_IDMAP: Final = "BIN_FLAT"
    INDEX_FAISS_BIN_IVFFLAT: Final = "BIN_IVF_FLAT"
    INDEX_FAISS_IDMAP: Final = "FLAT"
    INDEX_FAISS_IVFFLAT: Final = "IVF_FLAT"
    INDEX_FAISS_IVFFLAT_CC: Final = "IVF_FLAT_CC"
    INDEX_FAISS_IVFPQ: Final = "IVF_PQ"
    INDEX_FAISS_SCANN: Final = "SCANN"
    INDEX_FAISS_IVFSQ8: Final = "IVF_SQ8"
    INDEX_FAISS_GPU_IDMAP: Final = "GPU_FAISS_FLAT"
    INDEX_FAISS_GPU_IVFFLAT: Final = "GPU_FAISS_IVF_FLAT"
    INDEX_FAISS_GPU_IVFPQ: Final = "GPU_FAISS_IVF_PQ"
    INDEX_FAISS_GPU_IVFSQ8: Final = "GPU_FAISS_IVF_SQ8"
    INDEX_RAFT_IVFFLAT: Final = "GPU_RAFT_IVF_FLAT"
    INDEX_RAFT_IVFPQ: Final = "GPU_RAFT_IVF_PQ"
    INDEX_RAFT_CAGRA: Final = "GPU_RAFT_CAGRA"
    INDEX_HNSW: Final = "HNSW"
    INDEX_DISKANN: Final = "DISKANN"


class Meta:
    """Keys used in data sets and configurations."""

    INDEX_TYPE: Final = "index_type"
    METRIC_TYPE: Final = "metric_type"
    DIM: Final = "dim"
    TENSOR: Final = "tensor"
    ROWS: Final = "rows"
    IDS: Final = "ids"
    DISTANCE: Final = "distance"
    LIMS: Final = "lims"
    TOPK: Final = "k"
    RADIUS: Final = "radius"
    RANGE_FILTER: Final = "range_filter"
    INPUT_IDS: Final = "input_ids"
    OUTPUT_TENSOR: Final = "output_tensor"
    DEVICE_ID: Final = "gpu_id"
    NUM_BUILD_THREAD: Final = "num_build_thread"
    TRACE_VISIT: Final = "trace_visit"
    JSON_INFO: Final = "json_info"
    JSON_ID_SET: Final = "json_id_set"


class IndexParam:
    """Names of index-specific parameters."""

    NPROBE: Final = "nprobe"
    NLIST: Final = "nlist"
    NBITS: Final = "nbits"
    M: Final = "m"
    SSIZE: Final = "ssize"
    REORDER_K: Final = "reorder_k"
    EFCONSTRUCTION: Final = "efConstruction"
    HNSW_M: Final = "M"
    EF: Final = "ef"
    OVERVIEW_LEVELS: Final = "overview_levels"


class Metric:
    """Names of the distance metrics."""

    IP: Final = "IP"
    L2: Final = "L2"
    COSINE: Final = "COSINE"
    HAMMING: Final = "HAMMING"
    JACCARD: Final = "JACCARD"
    SUBSTRUCTURE: Final = "SUBSTRUCTURE"
    SUPERSTRUCTURE: Final = "SUPERSTRUCTURE"


def is_metric_type(text: str, metric_type: str) -> bool:
    """Return whether *text* names *metric_type*, ignoring case."""
    return text.casefold() == metric_type.casefold()