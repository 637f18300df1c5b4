OMNI_CONFIG_HOME = "OMNI_CONFIG_HOME"
OMNI_ENDPOINT = "OMNI_ENDPOINT"
OMNI_TOKEN = "OMNI_TOKEN"
