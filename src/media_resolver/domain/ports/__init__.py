from .entity_resolver import EntityResolverPort
from .graphql_transport import GraphQLTransportPort, TransportResponse
from .resolution import ResolutionDispatcherPort, UrlClassifierPort

__all__ = [
    "EntityResolverPort",
    "GraphQLTransportPort",
    "ResolutionDispatcherPort",
    "TransportResponse",
    "UrlClassifierPort",
]
