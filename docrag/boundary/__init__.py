"""Boundary adapters: vector index, embedding and completion providers."""
