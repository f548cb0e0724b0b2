""" Integration with GraphQL: graphql-core """

from .schema import graphql_relay_schema, relay_arguments, connection_type_defs
from .resolver import relay_resolver
