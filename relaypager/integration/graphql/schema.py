""" Relay schema definitions """

from __future__ import annotations

from typing import Optional

from relaypager.node import RelayConnectionNode


# Relay types: use with every schema that has connections
# language=graphql
graphql_relay_schema = '''
"""Relay page info: boundaries of the current page"""
type PageInfo {
    hasPreviousPage: Boolean!
    hasNextPage: Boolean!
    startCursor: String
    endCursor: String
}

"""Relay connection: a paginated list"""
interface Connection {
    pageInfo: PageInfo!
}

"""Relay edge: a paginated item"""
interface Edge {
    cursor: String!
}
'''

# Relay pagination arguments: use with every field that returns a connection
# Example:
#   f"users({relay_arguments}): UserConnection"
relay_arguments = 'first: Int, after: String, last: Int, before: String'


def connection_type_defs(Node: type[RelayConnectionNode], node_type_name: Optional[str] = None) -> str:
    """ Generate GraphQL type definitions for a connection of nodes

    Uses the node's `connection_type_name` and `edge_type_name`.

    Args:
        Node: the node class
        node_type_name: GraphQL type name for the node. Default: the class name
    """
    node_type_name = node_type_name or Node.__name__

    # language=graphql
    return f'''
type {Node.connection_type_name} implements Connection {{
    edges: [{Node.edge_type_name}!]!
    pageInfo: PageInfo!
}}

type {Node.edge_type_name} implements Edge {{
    node: {node_type_name}!
    cursor: String!
}}
'''
