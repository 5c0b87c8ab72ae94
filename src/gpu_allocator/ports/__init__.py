"""Ports - interfaces at the edges of the GPU allocator."""
