"""Visit and meta records of HNSW, IVF-Flat and DiskANN indexes."""