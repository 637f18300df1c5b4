from contextlib import asynccontextmanager
from typing import Optional

import click

from .alias import AliasedGroup
from .blocking import blocking
from .exceptions import handle_exceptions
from .opt import arg_labels, opt_config, opt_endpoint
from omni_machines.client.service import ResourceService
from omni_machines.config import OmniConfigV1Alpha1
from omni_machines.machine import add_machine_labels, remove_machine, remove_machine_labels, update_machine_lock


@asynccontextmanager
async def omni_service(config_path: Optional[str], endpoint: Optional[str]):
    config = OmniConfigV1Alpha1.load(config_path)
    if endpoint is not None:
        config.endpoint = endpoint

    async with config.channel() as channel:
        yield ResourceService(channel=channel, runtime=config.runtime)


@click.group(cls=AliasedGroup)
def label():
    """Manage user labels of a machine"""


@label.command("add")
@click.argument("machine_id", type=str)
@arg_labels()
@opt_config
@opt_endpoint
@handle_exceptions
@blocking
async def label_add(machine_id: str, labels: tuple[str, ...], config_path: Optional[str], endpoint: Optional[str]):
    """Add labels to a machine, formatted as key=value or key"""
    async with omni_service(config_path, endpoint) as service:
        await add_machine_labels(service, machine_id, *labels)
    click.echo(f"Labeled machine '{machine_id}'")


@label.command("remove")
@click.argument("machine_id", type=str)
@click.argument("keys", type=str, nargs=-1, required=True)
@opt_config
@opt_endpoint
@handle_exceptions
@blocking
async def label_remove(machine_id: str, keys: tuple[str, ...], config_path: Optional[str], endpoint: Optional[str]):
    """Remove label keys from a machine"""
    async with omni_service(config_path, endpoint) as service:
        await remove_machine_labels(service, machine_id, *keys)
    click.echo(f"Removed labels {', '.join(keys)} from machine '{machine_id}'")


@click.command("remove")
@click.argument("machine_id", type=str)
@click.option("--cluster", "cluster", type=str, default=None, help="Also remove the machine from this cluster")
@opt_config
@opt_endpoint
@handle_exceptions
@blocking
async def remove(machine_id: str, cluster: Optional[str], config_path: Optional[str], endpoint: Optional[str]):
    """Remove a machine from Omni"""
    async with omni_service(config_path, endpoint) as service:
        await remove_machine(service, machine_id, cluster)
    click.echo(f"Removed machine '{machine_id}'")


@click.command("lock")
@click.argument("machine_id", type=str)
@opt_config
@opt_endpoint
@handle_exceptions
@blocking
async def lock(machine_id: str, config_path: Optional[str], endpoint: Optional[str]):
    """Lock a machine, preventing config updates"""
    async with omni_service(config_path, endpoint) as service:
        await update_machine_lock(service, machine_id, True)
    click.echo(f"Locked machine '{machine_id}'")


@click.command("unlock")
@click.argument("machine_id", type=str)
@opt_config
@opt_endpoint
@handle_exceptions
@blocking
async def unlock(machine_id: str, config_path: Optional[str], endpoint: Optional[str]):
    """Unlock a machine"""
    async with omni_service(config_path, endpoint) as service:
        await update_machine_lock(service, machine_id, False)
    click.echo(f"Unlocked machine '{machine_id}'")
