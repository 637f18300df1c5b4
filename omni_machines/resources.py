"""Omni resource model and well-known resource types."""

from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field

from omni_machines.protocol import resources_pb

DefaultNamespace = "default"

MachineLabelsType = "MachineLabels.omni.sidero.dev"
MachineStatusType = "MachineStatuses.omni.sidero.dev"
MachineSetNodeType = "MachineSetNodes.omni.sidero.dev"
SiderolinkResourceType = "Links.omni.sidero.dev"
ConfigPatchType = "ConfigPatches.omni.sidero.dev"

# labels carrying this prefix are managed by Omni itself
SystemLabelPrefix = "omni.sidero.dev/"

LabelCluster = SystemLabelPrefix + "cluster"
LabelClusterMachine = SystemLabelPrefix + "cluster-machine"
LabelMachine = SystemLabelPrefix + "machine"

# presence-based: an empty value marks the machine as locked
MachineLocked = SystemLabelPrefix + "locked"


class ResourceMetadata(BaseModel):
    type: str
    namespace: str = DefaultNamespace
    id: str
    version: str | None = None
    owner: str = ""
    phase: Literal["running", "tearingDown"] = "running"
    labels: dict[str, str] | None = None
    annotations: dict[str, str] | None = None

    def ensure_labels(self) -> dict[str, str]:
        """Return the label map, allocating an empty one on first use."""
        if self.labels is None:
            self.labels = {}
        return self.labels

    def ensure_annotations(self) -> dict[str, str]:
        """Return the annotation map, allocating an empty one on first use."""
        if self.annotations is None:
            self.annotations = {}
        return self.annotations

    def to_protobuf(self) -> resources_pb.Metadata:
        return resources_pb.Metadata(
            type=self.type,
            namespace=self.namespace,
            id=self.id,
            version=self.version or "",
            owner=self.owner,
            phase=self.phase,
            labels=self.labels or {},
            annotations=self.annotations or {},
        )

    def reference(self) -> ResourceMetadata:
        """Identity-only copy, as accepted by Get, Delete and Teardown."""
        return ResourceMetadata(type=self.type, namespace=self.namespace, id=self.id)

    def __str__(self):
        return f"{self.type}({self.namespace}/{self.id})"


class Resource(BaseModel):
    metadata: ResourceMetadata
    spec: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def new(cls, type: str, id: str, namespace: str = DefaultNamespace) -> Resource:
        return cls(metadata=ResourceMetadata(type=type, namespace=namespace, id=id))

    def to_protobuf(self) -> resources_pb.Resource:
        return resources_pb.Resource(metadata=self.metadata.to_protobuf(), spec=json.dumps(self.spec))


def machine_labels(machine_id: str) -> ResourceMetadata:
    return ResourceMetadata(type=MachineLabelsType, id=machine_id)


def machine_status(machine_id: str) -> ResourceMetadata:
    return ResourceMetadata(type=MachineStatusType, id=machine_id)


def machine_set_node(machine_id: str) -> ResourceMetadata:
    return ResourceMetadata(type=MachineSetNodeType, id=machine_id)


def siderolink(machine_id: str) -> ResourceMetadata:
    return ResourceMetadata(type=SiderolinkResourceType, id=machine_id)
