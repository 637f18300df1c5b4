from .common import CONFIG_API_VERSION, CONFIG_PATH
from .env import OMNI_CONFIG_HOME, OMNI_ENDPOINT, OMNI_TOKEN
from .omni import OmniConfigV1Alpha1, OmniTLSConfig

__all__ = [
    "CONFIG_API_VERSION",
    "CONFIG_PATH",
    "OMNI_CONFIG_HOME",
    "OMNI_ENDPOINT",
    "OMNI_TOKEN",
    "OmniConfigV1Alpha1",
    "OmniTLSConfig",
]
