"""
GPU Allocator - Preferred allocation for shared GPU devices

Chooses which devices a device plugin hands to a container: topology-aligned
selection for plain GPUs, and packed or distributed selection for
time-sliced replicas.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"
