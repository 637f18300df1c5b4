"""
Machine label and lifecycle operations
"""

import logging

from omni_machines.client.service import IfVersion, ResourceStore, Unconditional
from omni_machines.cluster import destroy_nodes, destroy_resources, get_machine_config_patches_to_delete
from omni_machines.common.exceptions import ResourceNotFoundError
from omni_machines.labels import copy_user_labels, parse_labels
from omni_machines.resources import (
    MachineLocked,
    Resource,
    machine_labels,
    machine_set_node,
    machine_status,
    siderolink,
)

logger = logging.getLogger(__name__)


async def add_machine_labels(service: ResourceStore, machine_id: str, *labels: str):
    """Merge labels into the machine labels resource, creating it on first use.

    Existing resources are updated with an optimistic version check, a
    concurrent modification fails with ResourceConflictError.
    """
    requested = parse_labels(*labels)
    resource = Resource(metadata=machine_labels(machine_id))

    exists = True
    try:
        resource = await service.get(resource.metadata)
    except ResourceNotFoundError:
        exists = False

    if exists:
        resource.metadata.labels = {
            **(resource.metadata.labels or {}),
            **requested,
        }
        await service.update(resource, IfVersion(resource.metadata.version))
        logger.debug("updated labels of machine %s", machine_id)
        return

    resource.metadata.ensure_labels().update(requested)

    status = await service.get(machine_status(machine_id))
    copy_user_labels(status, resource)

    if not resource.metadata.labels:
        logger.debug("no labels to set on machine %s", machine_id)
        return

    await service.create(resource)
    logger.debug("created labels of machine %s", machine_id)


async def remove_machine_labels(service: ResourceStore, machine_id: str, *keys: str):
    """Remove label keys from the machine labels resource.

    The resource is deleted once no labels are left on it.
    """
    metadata = machine_labels(machine_id)

    try:
        resource = await service.get(metadata)
    except ResourceNotFoundError:
        resource = Resource(metadata=metadata)

        status = await service.get(machine_status(machine_id))
        copy_user_labels(status, resource)

        if not resource.metadata.labels:
            logger.debug("machine %s has no user labels", machine_id)
            return

        await service.create(resource)

    if not resource.metadata.labels:
        return

    removed = [key for key in keys if resource.metadata.labels.pop(key, None) is not None]
    if not removed:
        logger.debug("none of %s are set on machine %s", list(keys), machine_id)
        return

    if not resource.metadata.labels:
        await service.delete(resource.metadata.reference())
        logger.debug("deleted labels of machine %s", machine_id)
    else:
        await service.update(resource, Unconditional())
        logger.debug("removed labels %s from machine %s", removed, machine_id)


async def remove_machine(service: ResourceStore, machine_id: str, cluster: str | None = None):
    """Remove a machine from Omni and optionally from a cluster.

    Steps run in order and are not rolled back: the first failure aborts
    the sequence and propagates.
    """
    link = siderolink(machine_id)

    await service.teardown(link)

    # remove the machine from the cluster
    if cluster:
        await destroy_nodes(service, cluster, [machine_id], lambda owner: owner != "")

    await service.delete(link)

    patches = await get_machine_config_patches_to_delete(service, machine_id)
    await destroy_resources(service, patches)

    logger.info("removed machine %s", machine_id)


async def update_machine_lock(service: ResourceStore, machine_id: str, locked: bool):
    """Set or clear the locked annotation on the machine set node"""
    machine = await service.get(machine_set_node(machine_id))

    annotations = machine.metadata.ensure_annotations()
    if locked:
        annotations[MachineLocked] = ""
    else:
        annotations.pop(MachineLocked, None)

    await service.update(machine, Unconditional())
    logger.debug("machine %s locked: %s", machine_id, locked)
