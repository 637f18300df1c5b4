from unittest.mock import AsyncMock

import pytest

from .cluster import destroy_nodes, destroy_resources, get_machine_config_patches_to_delete
from .common.exceptions import ResourceError
from .resources import (
    ConfigPatchType,
    LabelCluster,
    LabelClusterMachine,
    LabelMachine,
    MachineSetNodeType,
    Resource,
    ResourceMetadata,
    machine_set_node,
)
from .testing import MemoryResourceService

pytestmark = pytest.mark.anyio


def node(id: str, cluster: str = "talos-1", owner: str = "") -> Resource:
    return Resource(metadata=ResourceMetadata(type=MachineSetNodeType, id=id, owner=owner, labels={LabelCluster: cluster}))


def patch(id: str, labels: dict[str, str]) -> Resource:
    return Resource(metadata=ResourceMetadata(type=ConfigPatchType, id=id, labels=labels))


class TestDestroyResources:
    async def test_teardown_then_delete(self):
        store = MemoryResourceService()
        store.seed(patch("p1", {}), patch("p2", {}))

        await destroy_resources(store, [ResourceMetadata(type=ConfigPatchType, id="p1"), patch("p2", {}).metadata])

        assert store.resources == {}
        assert [(method, metadata.id) for method, metadata in store.calls] == [
            ("teardown", "p1"),
            ("delete", "p1"),
            ("teardown", "p2"),
            ("delete", "p2"),
        ]

    async def test_skips_missing(self):
        store = MemoryResourceService()
        store.seed(patch("p2", {}))

        await destroy_resources(store, [ResourceMetadata(type=ConfigPatchType, id="p1"), patch("p2", {}).metadata])

        assert store.resources == {}

    async def test_propagates_other_errors(self):
        service = AsyncMock()
        service.teardown.side_effect = ResourceError("internal error")

        with pytest.raises(ResourceError):
            await destroy_resources(service, [ResourceMetadata(type=ConfigPatchType, id="p1")])

        service.delete.assert_not_called()


class TestDestroyNodes:
    async def test_owner_filter(self):
        store = MemoryResourceService()
        store.seed(node("m1", owner="MachineSetNodeController"), node("m2", owner=""))

        await destroy_nodes(store, "talos-1", ["m1", "m2"], lambda owner: owner != "")

        assert store.find(machine_set_node("m1")) is None
        assert store.find(machine_set_node("m2")) is not None

    async def test_without_filter(self):
        store = MemoryResourceService()
        store.seed(node("m1", owner="MachineSetNodeController"), node("m2", owner=""))

        await destroy_nodes(store, "talos-1", ["m1", "m2"])

        assert store.resources == {}

    async def test_skips_other_clusters_and_missing_nodes(self):
        store = MemoryResourceService()
        store.seed(node("m1", cluster="talos-2", owner="MachineSetNodeController"))

        await destroy_nodes(store, "talos-1", ["m1", "m3"], lambda owner: owner != "")

        assert store.find(machine_set_node("m1")) is not None
        assert [method for method, _ in store.calls] == ["get", "get"]


async def test_get_machine_config_patches_to_delete():
    store = MemoryResourceService()
    store.seed(
        patch("400-cm", {LabelClusterMachine: "m1"}),
        patch("500-m", {LabelMachine: "m1"}),
        patch("600-both", {LabelClusterMachine: "m1", LabelMachine: "m1"}),
        patch("700-other", {LabelMachine: "m2"}),
        patch("800-cluster", {LabelCluster: "talos-1"}),
    )

    patches = await get_machine_config_patches_to_delete(store, "m1")

    assert sorted(p.id for p in patches) == ["400-cm", "500-m", "600-both"]
    assert all(p.type == ConfigPatchType and p.labels is None for p in patches)
