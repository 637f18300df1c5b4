"""Cluster level helpers used when removing machines."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterable

from omni_machines.common.exceptions import ResourceNotFoundError
from omni_machines.resources import (
    ConfigPatchType,
    DefaultNamespace,
    LabelCluster,
    LabelClusterMachine,
    LabelMachine,
    ResourceMetadata,
    machine_set_node,
)

if TYPE_CHECKING:
    from omni_machines.client.service import ResourceStore

logger = logging.getLogger(__name__)


async def destroy_resources(service: ResourceStore, resources: Iterable[ResourceMetadata]):
    """Tear down and delete each resource, skipping the ones already gone"""
    for metadata in resources:
        reference = metadata.reference()
        try:
            await service.teardown(reference)
            await service.delete(reference)
        except ResourceNotFoundError:
            logger.debug("%s is already gone", reference)
            continue

        logger.debug("destroyed %s", reference)


async def destroy_nodes(
    service: ResourceStore,
    cluster: str,
    ids: Iterable[str],
    owner_filter: Callable[[str], bool] | None = None,
):
    """Remove machine set nodes of a cluster.

    Nodes belonging to another cluster, and nodes whose owner is rejected
    by ``owner_filter``, are left in place.
    """
    nodes = []

    for id in ids:
        try:
            node = await service.get(machine_set_node(id))
        except ResourceNotFoundError:
            logger.debug("machine %s is not a member of any machine set", id)
            continue

        if (node.metadata.labels or {}).get(LabelCluster) != cluster:
            logger.debug("machine %s does not belong to cluster %s", id, cluster)
            continue

        if owner_filter is not None and not owner_filter(node.metadata.owner):
            logger.debug("skipping machine set node %s owned by '%s'", id, node.metadata.owner)
            continue

        nodes.append(node.metadata)

    await destroy_resources(service, nodes)


async def get_machine_config_patches_to_delete(service: ResourceStore, machine_id: str) -> list[ResourceMetadata]:
    """Config patches targeting the machine, directly or through its cluster machine"""
    patches: dict[str, ResourceMetadata] = {}

    for label in (LabelClusterMachine, LabelMachine):
        for patch in await service.list(ConfigPatchType, DefaultNamespace, ["{}={}".format(label, machine_id)]):
            patches.setdefault(patch.metadata.id, patch.metadata.reference())

    return list(patches.values())
