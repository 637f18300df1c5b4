import logging
from functools import partial

import click
from rich import traceback
from rich.logging import RichHandler

from omni_machines.labels import parse_labels


def _opt_log_level_callback(ctx, param, value):
    traceback.install()

    basicConfig = partial(logging.basicConfig, handlers=[RichHandler()])
    if value:
        basicConfig(level=value.upper())
    else:
        basicConfig(level=logging.INFO)


opt_log_level = click.option(
    "--log-level",
    "log_level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the log level",
    expose_value=False,
    is_eager=True,
    callback=_opt_log_level_callback,
)

opt_config = click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to the omni config file",
)

opt_endpoint = click.option(
    "--endpoint",
    "endpoint",
    type=str,
    default=None,
    help="Omni API endpoint, overrides the config file",
)


def _arg_labels_callback(ctx, param, value):
    try:
        parse_labels(*value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None

    return value


arg_labels = partial(
    click.argument,
    "labels",
    type=str,
    nargs=-1,
    required=True,
    callback=_arg_labels_callback,
)
