"""Unit tests for the best-effort topology allocation policy."""

import pytest

from gpu_allocator.adapters.outbound.best_effort import BestEffortPolicy


@pytest.mark.unit
class TestBestEffortPolicy:
    """Test greedy topology-aware selection."""

    def test_prefers_nvlinked_pair(self, device_graph):
        """Two GPUs are chosen from the same NVLink island."""
        policy = BestEffortPolicy(device_graph)
        available = device_graph.devices_from(["GPU-0", "GPU-2", "GPU-1", "GPU-3"])

        result = policy.allocate(available, [], 2)

        assert [d.uuid for d in result] == ["GPU-0", "GPU-1"]

    def test_grows_from_required(self, device_graph):
        """Required devices seed the selection."""
        policy = BestEffortPolicy(device_graph)
        available = device_graph.devices_from(["GPU-0", "GPU-1", "GPU-2", "GPU-3"])
        required = device_graph.devices_from(["GPU-2"])

        result = policy.allocate(available, required, 2)

        assert [d.uuid for d in result] == ["GPU-2", "GPU-3"]

    def test_spills_to_next_island(self, device_graph):
        """Ties beyond the best island go to the earliest available GPU."""
        policy = BestEffortPolicy(device_graph)
        available = device_graph.devices_from(["GPU-0", "GPU-1", "GPU-2", "GPU-3"])

        result = policy.allocate(available, [], 3)

        assert [d.uuid for d in result] == ["GPU-0", "GPU-1", "GPU-2"]

    def test_required_only(self, device_graph):
        """When required fills the request it is returned as is."""
        policy = BestEffortPolicy(device_graph)
        available = device_graph.devices_from(["GPU-0", "GPU-3"])

        result = policy.allocate(available, device_graph.devices_from(["GPU-3", "GPU-0"]), 2)

        assert [d.uuid for d in result] == ["GPU-3", "GPU-0"]

    @pytest.mark.parametrize(
        "available, required, size",
        [
            (["GPU-0", "GPU-1"], [], 0),
            (["GPU-0"], [], 2),
            (["GPU-0", "GPU-1", "GPU-2"], ["GPU-0", "GPU-1"], 1),
            (["GPU-0", "GPU-1"], ["GPU-3"], 2),
            (["GPU-0", "GPU-0"], ["GPU-0"], 2),
            (["GPU-1", "GPU-1", "GPU-1"], [], 2),
        ],
    )
    def test_unsatisfiable_returns_empty(self, device_graph, available, required, size):
        """Requests that cannot be met yield an empty selection."""
        policy = BestEffortPolicy(device_graph)

        result = policy.allocate(
            device_graph.devices_from(available), device_graph.devices_from(required), size
        )

        assert result == []
