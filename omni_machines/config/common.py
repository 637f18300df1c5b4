from os import getenv
from pathlib import Path

from xdg_base_dirs import xdg_config_home

from .env import OMNI_CONFIG_HOME

CONFIG_API_VERSION = "omni-machines.sidero.dev/v1alpha1"
CONFIG_PATH = Path(getenv(OMNI_CONFIG_HOME, xdg_config_home() / "omni-machines"))
