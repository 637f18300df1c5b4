import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from grpc import StatusCode
from grpc.aio import AioRpcError, Metadata

from .service import IfVersion, ResourceService, Unconditional
from omni_machines.common.exceptions import ResourceConflictError, ResourceNotFoundError
from omni_machines.protocol import resources_pb
from omni_machines.resources import ConfigPatchType, MachineLabelsType, Resource, ResourceMetadata, machine_labels

pytestmark = pytest.mark.anyio


def body(resource: Resource) -> str:
    return resource.model_dump_json(exclude_none=True)


@pytest.fixture
def calls() -> dict[str, AsyncMock]:
    return {}


@pytest.fixture
def service(calls) -> ResourceService:
    channel = MagicMock()

    def unary_unary(path, request_serializer, response_deserializer):
        call = AsyncMock(return_value=MagicMock())
        calls[path.rsplit("/", 1)[1]] = call
        return call

    channel.unary_unary.side_effect = unary_unary
    return ResourceService(channel=channel)


def labels_resource(**labels) -> Resource:
    return Resource(
        metadata=ResourceMetadata(type=MachineLabelsType, id="machine-1", version="3", labels=labels),
    )


def test_registers_methods(service, calls):
    registered = {c.args[0]: c.kwargs for c in service.channel.unary_unary.call_args_list}

    assert sorted(calls) == ["Create", "Delete", "Get", "List", "Teardown", "Update"]
    assert registered["/omni.resources.ResourceService/Get"] == {
        "request_serializer": resources_pb.GetRequest.SerializeToString,
        "response_deserializer": resources_pb.GetResponse.FromString,
    }
    assert (
        registered["/omni.resources.ResourceService/Teardown"]["request_serializer"]
        == resources_pb.DeleteRequest.SerializeToString
    )


def test_wire_field_numbers():
    # field 1, length delimited
    assert resources_pb.GetRequest(type="a").SerializeToString() == b"\n\x01a"
    assert resources_pb.UpdateRequest(currentVersion="3").SerializeToString() == b"\n\x013"
    # field 8 (selectors), length delimited
    assert resources_pb.ListRequest(selectors=["x"]).SerializeToString() == b"B\x01x"
    assert resources_pb.GetResponse.FromString(b"\n\x02{}").body == "{}"


async def test_get(service, calls):
    calls["Get"].return_value = resources_pb.GetResponse(body=body(labels_resource(env="prod")))

    resource = await service.get(machine_labels("machine-1"))

    assert resource.metadata.labels == {"env": "prod"}
    assert resource.metadata.version == "3"
    calls["Get"].assert_awaited_once_with(
        resources_pb.GetRequest(type=MachineLabelsType, namespace="default", id="machine-1"),
        metadata=(("runtime", "Omni"),),
    )


async def test_get_not_found(service, calls):
    calls["Get"].side_effect = AioRpcError(StatusCode.NOT_FOUND, Metadata(), Metadata(), details="not found")

    with pytest.raises(ResourceNotFoundError):
        await service.get(machine_labels("machine-1"))


async def test_list(service, calls):
    calls["List"].return_value = resources_pb.ListResponse(
        items=[
            body(Resource.new(ConfigPatchType, "p1")),
            body(Resource.new(ConfigPatchType, "p2")),
        ],
        total=2,
    )

    resources = await service.list(ConfigPatchType, selectors=["omni.sidero.dev/machine=machine-1"])

    assert [r.metadata.id for r in resources] == ["p1", "p2"]
    request = calls["List"].await_args.args[0]
    assert request == resources_pb.ListRequest(
        type=ConfigPatchType,
        namespace="default",
        selectors=["omni.sidero.dev/machine=machine-1"],
    )


async def test_create(service, calls):
    resource = labels_resource(env="prod")
    resource.metadata.version = None

    created = await service.create(resource)

    assert created == resource
    request = calls["Create"].await_args.args[0]
    assert dict(request.resource.metadata.labels) == {"env": "prod"}
    assert request.resource.metadata.type == MachineLabelsType
    assert request.resource.metadata.version == ""
    assert json.loads(request.resource.spec) == {}


async def test_update_if_version(service, calls):
    await service.update(labels_resource(env="prod"), IfVersion("3"))

    request = calls["Update"].await_args.args[0]
    assert request.currentVersion == "3"
    assert request.resource.metadata.id == "machine-1"


async def test_update_unconditional(service, calls):
    await service.update(labels_resource(env="prod"), Unconditional())

    request = calls["Update"].await_args.args[0]
    assert request.currentVersion == ""


async def test_update_conflict(service, calls):
    calls["Update"].side_effect = AioRpcError(StatusCode.FAILED_PRECONDITION, Metadata(), Metadata(), details="")

    with pytest.raises(ResourceConflictError):
        await service.update(labels_resource(env="prod"), IfVersion("2"))


async def test_delete_and_teardown_send_identity(service, calls):
    metadata = labels_resource(env="prod").metadata

    await service.teardown(metadata)
    await service.delete(metadata)

    expected = resources_pb.DeleteRequest(type=MachineLabelsType, namespace="default", id="machine-1")
    assert calls["Teardown"].await_args.args[0] == expected
    assert calls["Delete"].await_args.args[0] == expected


async def test_runtime_metadata():
    channel = MagicMock()
    call = AsyncMock()
    channel.unary_unary.return_value = call

    service = ResourceService(channel=channel, runtime="Talos")
    await service.delete(machine_labels("machine-1"))

    assert call.await_args.kwargs["metadata"] == (("runtime", "Talos"),)
