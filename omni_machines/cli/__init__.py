import click

from .alias import AliasedGroup
from .machine import label, lock, remove, unlock
from .opt import opt_log_level


@click.group(cls=AliasedGroup)
@opt_log_level
def omni():
    """Manage Omni machines"""


omni.add_command(label)
omni.add_command(remove)
omni.add_command(lock)
omni.add_command(unlock)

if __name__ == "__main__":
    omni()
