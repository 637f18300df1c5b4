from __future__ import annotations

import os
from pathlib import Path
from typing import ClassVar, Literal, Optional, Self

import grpc
import yaml
from pydantic import BaseModel, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .common import CONFIG_API_VERSION, CONFIG_PATH
from omni_machines.client.service import RuntimeOmni
from omni_machines.common.exceptions import ConfigurationError
from omni_machines.common.grpc import aio_insecure_channel, aio_secure_channel, ssl_channel_credentials


class OmniTLSConfig(BaseModel):
    """TLS settings, ``ca`` is a base64 encoded PEM bundle"""

    ca: str = Field(default="")
    # plaintext transport, no bearer token allowed
    insecure: bool = Field(default=False)


class OmniConfigV1Alpha1(BaseSettings):
    """Connection settings for the Omni API.

    Values are read from the YAML config file, unset fields fall back to
    ``OMNI_*`` environment variables.
    """

    CONFIG_FILE_PATH: ClassVar[Path] = CONFIG_PATH / "config.yaml"

    model_config = SettingsConfigDict(env_prefix="OMNI_")

    path: Path | None = Field(default=None, exclude=True)

    apiVersion: Literal["omni-machines.sidero.dev/v1alpha1"] = Field(default=CONFIG_API_VERSION)
    kind: Literal["OmniConfig"] = Field(default="OmniConfig")

    endpoint: str | None = Field(default=None)
    token: str | None = Field(default=None)
    runtime: str = Field(default=RuntimeOmni)
    tls: OmniTLSConfig = Field(default_factory=OmniTLSConfig)
    grpcOptions: dict[str, str | int] | None = Field(default_factory=dict)

    def channel(self) -> grpc.aio.Channel:
        if self.endpoint is None:
            raise ConfigurationError("endpoint not set in omni config")

        if self.tls.insecure:
            if self.token is not None:
                raise ConfigurationError("token can not be sent over an insecure channel")
            return aio_insecure_channel(self.endpoint, self.grpcOptions)

        credentials = ssl_channel_credentials(self.tls)
        if self.token is not None:
            credentials = grpc.composite_channel_credentials(
                credentials,
                grpc.access_token_call_credentials(self.token),
            )

        return aio_secure_channel(self.endpoint, credentials, self.grpcOptions)

    @classmethod
    def from_file(cls, path: os.PathLike) -> Self:
        with open(path) as f:
            try:
                v = cls.model_validate(yaml.safe_load(f) or {})
            except ValidationError as e:
                raise ConfigurationError(f"Invalid omni config '{path}'") from e
            v.path = Path(path)
            return v

    @classmethod
    def load(cls, path: Optional[os.PathLike] = None) -> Self:
        """Load the config file, falling back to the environment when the default file is missing."""
        if path is not None:
            if not Path(path).exists():
                raise ConfigurationError(f"Omni config '{path}' does not exist.")
            return cls.from_file(path)

        if cls.CONFIG_FILE_PATH.exists():
            return cls.from_file(cls.CONFIG_FILE_PATH)

        try:
            return cls()
        except ValidationError as e:
            raise ConfigurationError("Invalid omni config in environment") from e

    @classmethod
    def save(cls, config: Self, path: Optional[os.PathLike] = None) -> Path:
        """Saves the config as YAML."""
        config.path = Path(path) if path is not None else cls.CONFIG_FILE_PATH
        os.makedirs(config.path.parent, exist_ok=True)
        with config.path.open(mode="w") as f:
            yaml.safe_dump(config.model_dump(mode="json", exclude={"path"}), f, sort_keys=False)
        return config.path
