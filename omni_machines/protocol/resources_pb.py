"""
Protobuf messages of the Omni resource API

The descriptors mirror proto/omni/resources/resources.proto and
proto/v1alpha1/resource.proto. They are registered in a private descriptor
pool when the module is imported, the resulting classes behave like protoc
generated messages.
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_Field = descriptor_pb2.FieldDescriptorProto


def _field(name, number, type=_Field.TYPE_STRING, label=_Field.LABEL_OPTIONAL, type_name=None):
    field = _Field(name=name, number=number, type=type, label=label)
    if type_name is not None:
        field.type_name = type_name
    return field


def _repeated(name, number, type=_Field.TYPE_STRING):
    return _field(name, number, type, _Field.LABEL_REPEATED)


def _map(name, number, entry):
    return _field(name, number, _Field.TYPE_MESSAGE, _Field.LABEL_REPEATED, entry)


def _map_entry(name):
    return descriptor_pb2.DescriptorProto(
        name=name,
        field=[_field("key", 1), _field("value", 2)],
        options=descriptor_pb2.MessageOptions(map_entry=True),
    )


def _message(name, *fields, nested=()):
    return descriptor_pb2.DescriptorProto(name=name, field=list(fields), nested_type=list(nested))


def _identity(name):
    return _message(name, _field("type", 1), _field("namespace", 2), _field("id", 3))


def _method(name, input_type, output_type):
    return descriptor_pb2.MethodDescriptorProto(
        name=name,
        input_type=".omni.resources." + input_type,
        output_type=".omni.resources." + output_type,
    )


_COSI_RESOURCE = descriptor_pb2.FileDescriptorProto(
    name="v1alpha1/resource.proto",
    package="cosi.resource",
    syntax="proto3",
    message_type=[
        _message(
            "Metadata",
            _field("namespace", 1),
            _field("type", 2),
            _field("id", 3),
            _field("version", 4),
            _field("owner", 5),
            _field("phase", 6),
            _repeated("finalizers", 9),
            _map("labels", 10, ".cosi.resource.Metadata.LabelsEntry"),
            _map("annotations", 11, ".cosi.resource.Metadata.AnnotationsEntry"),
            nested=[_map_entry("LabelsEntry"), _map_entry("AnnotationsEntry")],
        ),
    ],
)

_OMNI_RESOURCES = descriptor_pb2.FileDescriptorProto(
    name="omni/resources/resources.proto",
    package="omni.resources",
    syntax="proto3",
    dependency=[_COSI_RESOURCE.name],
    message_type=[
        _message(
            "Resource",
            _field("metadata", 1, _Field.TYPE_MESSAGE, type_name=".cosi.resource.Metadata"),
            _field("spec", 2),
        ),
        _identity("GetRequest"),
        _message("GetResponse", _field("body", 1)),
        _message(
            "ListRequest",
            _field("type", 1),
            _field("namespace", 2),
            _field("offset", 3, _Field.TYPE_INT32),
            _field("limit", 4, _Field.TYPE_INT32),
            _field("sort_by_field", 5),
            _field("sort_descending", 6, _Field.TYPE_BOOL),
            _repeated("search_for", 7),
            _repeated("selectors", 8),
        ),
        _message("ListResponse", _repeated("items", 1), _field("total", 2, _Field.TYPE_INT32)),
        _message("CreateRequest", _field("resource", 1, _Field.TYPE_MESSAGE, type_name=".omni.resources.Resource")),
        _message("CreateResponse"),
        _message(
            "UpdateRequest",
            _field("currentVersion", 1),
            _field("resource", 2, _Field.TYPE_MESSAGE, type_name=".omni.resources.Resource"),
        ),
        _message("UpdateResponse"),
        _identity("DeleteRequest"),
        _message("DeleteResponse"),
    ],
    service=[
        descriptor_pb2.ServiceDescriptorProto(
            name="ResourceService",
            method=[
                _method("Get", "GetRequest", "GetResponse"),
                _method("List", "ListRequest", "ListResponse"),
                _method("Create", "CreateRequest", "CreateResponse"),
                _method("Update", "UpdateRequest", "UpdateResponse"),
                _method("Delete", "DeleteRequest", "DeleteResponse"),
                _method("Teardown", "DeleteRequest", "DeleteResponse"),
            ],
        ),
    ],
)

_pool = descriptor_pool.DescriptorPool()
_pool.AddSerializedFile(_COSI_RESOURCE.SerializeToString())
_pool.AddSerializedFile(_OMNI_RESOURCES.SerializeToString())

DESCRIPTOR = _pool.FindFileByName(_OMNI_RESOURCES.name)


def _message_class(full_name):
    return message_factory.GetMessageClass(_pool.FindMessageTypeByName(full_name))


Metadata = _message_class("cosi.resource.Metadata")
Resource = _message_class("omni.resources.Resource")
GetRequest = _message_class("omni.resources.GetRequest")
GetResponse = _message_class("omni.resources.GetResponse")
ListRequest = _message_class("omni.resources.ListRequest")
ListResponse = _message_class("omni.resources.ListResponse")
CreateRequest = _message_class("omni.resources.CreateRequest")
CreateResponse = _message_class("omni.resources.CreateResponse")
UpdateRequest = _message_class("omni.resources.UpdateRequest")
UpdateResponse = _message_class("omni.resources.UpdateResponse")
DeleteRequest = _message_class("omni.resources.DeleteRequest")
DeleteResponse = _message_class("omni.resources.DeleteResponse")
