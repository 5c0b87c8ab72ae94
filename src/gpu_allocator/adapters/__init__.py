"""Adapters - implementations of the GPU allocator ports."""
