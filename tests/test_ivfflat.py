import json

import pytest

from knowhere.feder.ivfflat import ClusterInfo, IVFFlatMeta


def test_cluster_info_round_trip():
    cluster = ClusterInfo(1, [3, 5], [0.5, 1.5])
    d = cluster.to_dict()
    assert d == {"id_": 1, "node_ids_": [3, 5], "centroid_vec_": [0.5, 1.5]}
    assert ClusterInfo.from_dict(d) == cluster


def test_meta_add_cluster_and_round_trip():
    meta = IVFFlatMeta(nlist=2, dim=2, ntotal=3)
    meta.add_cluster(0, [0, 2], (0.25, 0.75))
    meta.add_cluster(1, iter([1]), [1.0, 2.0])
    assert [c.id for c in meta.clusters] == [0, 1]
    assert meta.clusters[0].centroid == [0.25, 0.75]
    d = meta.to_dict()
    assert set(d) == {"nlist_", "dim_", "ntotal_", "clusters_"}
    assert IVFFlatMeta.from_dict(json.loads(json.dumps(d))) == meta


def test_meta_node_count_invariant():
    meta = IVFFlatMeta(nlist=2, dim=1, ntotal=4)
    meta.add_cluster(0, [0, 1, 2], [0.0])
    meta.add_cluster(1, [3], [1.0])
    assert sum(len(c.node_ids) for c in meta.clusters) == meta.ntotal


def test_add_cluster_wrong_dim_raises():
    meta = IVFFlatMeta(nlist=1, dim=3, ntotal=1)
    with pytest.raises(ValueError):
        meta.add_cluster(0, [0], [1.0, 2.0])
    assert meta.clusters == []