"""Graph algorithms operating on the adjacency capability."""
