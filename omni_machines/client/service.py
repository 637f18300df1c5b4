from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

from grpc.aio import Channel

from omni_machines.common.grpc import translate_grpc_exceptions
from omni_machines.protocol import resources_pb, resources_pb_grpc
from omni_machines.resources import DefaultNamespace, Resource, ResourceMetadata

logger = logging.getLogger(__name__)

# call metadata selecting the runtime that owns the resources
RUNTIME_METADATA_KEY = "runtime"
RuntimeOmni = "Omni"


@dataclass(frozen=True, slots=True)
class Unconditional:
    """Update regardless of the current resource version (last writer wins)."""


@dataclass(frozen=True, slots=True)
class IfVersion:
    """Update only if the stored resource still has the given version."""

    version: str


UpdatePrecondition = Unconditional | IfVersion


class ResourceStore(Protocol):
    """Contract required from a versioned resource store."""

    async def get(self, metadata: ResourceMetadata) -> Resource: ...

    async def list(
        self, type: str, namespace: str = DefaultNamespace, selectors: list[str] | None = None
    ) -> list[Resource]: ...

    async def create(self, resource: Resource) -> Resource: ...

    async def update(self, resource: Resource, precondition: UpdatePrecondition) -> Resource: ...

    async def delete(self, metadata: ResourceMetadata) -> None: ...

    async def teardown(self, metadata: ResourceMetadata) -> None: ...


def _identity(metadata: ResourceMetadata) -> dict[str, str]:
    return {"type": metadata.type, "namespace": metadata.namespace, "id": metadata.id}


@dataclass(kw_only=True, slots=True)
class ResourceService:
    """
    Omni resource API client

    Speaks the generic ResourceService of the Omni API over a grpc channel,
    every call targets the configured runtime.
    """

    channel: Channel
    runtime: str = RuntimeOmni
    stub: resources_pb_grpc.ResourceServiceStub = field(init=False)

    def __post_init__(self):
        self.stub = resources_pb_grpc.ResourceServiceStub(channel=self.channel)

    @property
    def _metadata(self):
        return ((RUNTIME_METADATA_KEY, self.runtime),)

    async def get(self, metadata: ResourceMetadata) -> Resource:
        logger.debug("get %s", metadata)
        with translate_grpc_exceptions():
            response = await self.stub.Get(resources_pb.GetRequest(**_identity(metadata)), metadata=self._metadata)
        return Resource.model_validate_json(response.body)

    async def list(
        self, type: str, namespace: str = DefaultNamespace, selectors: list[str] | None = None
    ) -> list[Resource]:
        logger.debug("list %s in %s (selectors: %s)", type, namespace, selectors)
        with translate_grpc_exceptions():
            response = await self.stub.List(
                resources_pb.ListRequest(type=type, namespace=namespace, selectors=selectors or []),
                metadata=self._metadata,
            )
        return [Resource.model_validate_json(item) for item in response.items]

    async def create(self, resource: Resource) -> Resource:
        logger.debug("create %s", resource.metadata)
        with translate_grpc_exceptions():
            await self.stub.Create(
                resources_pb.CreateRequest(resource=resource.to_protobuf()),
                metadata=self._metadata,
            )
        return resource

    async def update(self, resource: Resource, precondition: UpdatePrecondition) -> Resource:
        request = resources_pb.UpdateRequest(resource=resource.to_protobuf())
        match precondition:
            case IfVersion(version=version):
                request.currentVersion = version
            case Unconditional():
                pass
        logger.debug("update %s (%s)", resource.metadata, precondition)
        with translate_grpc_exceptions():
            await self.stub.Update(request, metadata=self._metadata)
        return resource

    async def delete(self, metadata: ResourceMetadata) -> None:
        logger.debug("delete %s", metadata)
        with translate_grpc_exceptions():
            await self.stub.Delete(resources_pb.DeleteRequest(**_identity(metadata)), metadata=self._metadata)

    async def teardown(self, metadata: ResourceMetadata) -> None:
        logger.debug("teardown %s", metadata)
        with translate_grpc_exceptions():
            await self.stub.Teardown(resources_pb.DeleteRequest(**_identity(metadata)), metadata=self._metadata)
