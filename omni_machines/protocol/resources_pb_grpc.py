"""Client stub for the Omni ResourceService"""

from . import resources_pb


class ResourceServiceStub:
    def __init__(self, channel):
        self.Get = channel.unary_unary(
            "/omni.resources.ResourceService/Get",
            request_serializer=resources_pb.GetRequest.SerializeToString,
            response_deserializer=resources_pb.GetResponse.FromString,
        )
        self.List = channel.unary_unary(
            "/omni.resources.ResourceService/List",
            request_serializer=resources_pb.ListRequest.SerializeToString,
            response_deserializer=resources_pb.ListResponse.FromString,
        )
        self.Create = channel.unary_unary(
            "/omni.resources.ResourceService/Create",
            request_serializer=resources_pb.CreateRequest.SerializeToString,
            response_deserializer=resources_pb.CreateResponse.FromString,
        )
        self.Update = channel.unary_unary(
            "/omni.resources.ResourceService/Update",
            request_serializer=resources_pb.UpdateRequest.SerializeToString,
            response_deserializer=resources_pb.UpdateResponse.FromString,
        )
        self.Delete = channel.unary_unary(
            "/omni.resources.ResourceService/Delete",
            request_serializer=resources_pb.DeleteRequest.SerializeToString,
            response_deserializer=resources_pb.DeleteResponse.FromString,
        )
        self.Teardown = channel.unary_unary(
            "/omni.resources.ResourceService/Teardown",
            request_serializer=resources_pb.DeleteRequest.SerializeToString,
            response_deserializer=resources_pb.DeleteResponse.FromString,
        )
