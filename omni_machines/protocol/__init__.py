from . import resources_pb, resources_pb_grpc

__all__ = ["resources_pb", "resources_pb_grpc"]
