from .labels import copy_user_labels, parse_labels
from .machine import add_machine_labels, remove_machine, remove_machine_labels, update_machine_lock

__all__ = [
    "add_machine_labels",
    "copy_user_labels",
    "parse_labels",
    "remove_machine",
    "remove_machine_labels",
    "update_machine_lock",
]
