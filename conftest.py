import pytest

from omni_machines.config import OmniConfigV1Alpha1


@pytest.fixture(scope="module")
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def tmp_config_path(tmp_path, monkeypatch):
    monkeypatch.setattr(OmniConfigV1Alpha1, "CONFIG_FILE_PATH", tmp_path / "config.yaml")
