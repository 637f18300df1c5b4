"""Machine label parsing and copying utilities."""

from __future__ import annotations

from omni_machines.resources import Resource, SystemLabelPrefix


def parse_labels(*labels: str) -> dict[str, str]:
    """Parse label strings into a label map.

    Every argument may hold several comma separated entries, each either
    ``key=value`` or a bare ``key`` (which maps to an empty value).
    Later entries override earlier ones.

    >>> parse_labels("env=prod, role", "env=dev")
    {'env': 'dev', 'role': ''}
    """
    result: dict[str, str] = {}

    for label in labels:
        for part in label.split(","):
            part = part.strip()
            if not part:
                continue

            key, _, value = part.partition("=")
            key = key.strip()
            if not key:
                raise ValueError("Invalid label '{}', key must not be empty".format(part))

            result[key] = value.strip()

    return result


def copy_user_labels(src: Resource, dst: Resource):
    """Copy the labels of src into dst, skipping system labels"""
    if not src.metadata.labels:
        return

    for key, value in src.metadata.labels.items():
        if key.startswith(SystemLabelPrefix):
            continue

        dst.metadata.ensure_labels()[key] = value
