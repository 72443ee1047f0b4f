"""Graph primitives and helpers.

This package provides the handle-recycling `SparseIndexStore`, the
`WeightedGraph` container built on it, the adjacency capability consumed by
graph algorithms, and `project_dense` for containers with handle gaps.
"""
