"""Declared graph schema for the filesystem adapter.

The adapter dispatches on the names defined here. SCHEMA_SDL renders the
same schema as GraphQL SDL for query front-ends that need to parse queries
against it.
"""

from typing import Dict, FrozenSet, Tuple


START_EDGE = "OriginDirectory"

DIRECTORY_TYPE = "Directory"
FILE_TYPE = "File"

TYPENAME_PROPERTY = "__typename"

CONTAINS_FILE_EDGE = "out_Directory_ContainsFile"
SUBDIRECTORY_EDGE = "out_Directory_Subdirectory"

# Sentinel name carried by the root directory vertex.
ORIGIN_NAME = "<origin>"

PROPERTIES: Dict[str, FrozenSet[str]] = {
    DIRECTORY_TYPE: frozenset({"name", "path", TYPENAME_PROPERTY}),
    FILE_TYPE: frozenset({"name", "path", "extension", TYPENAME_PROPERTY}),
}

# (source type, edge name) -> target type
EDGES: Dict[Tuple[str, str], str] = {
    (DIRECTORY_TYPE, CONTAINS_FILE_EDGE): FILE_TYPE,
    (DIRECTORY_TYPE, SUBDIRECTORY_EDGE): DIRECTORY_TYPE,
}

SCHEMA_SDL = """\
schema {
  query: RootSchemaQuery
}

type RootSchemaQuery {
  OriginDirectory: [Directory!]!
}

type Directory {
  name: String!
  path: String!

  out_Directory_ContainsFile: [File!]
  out_Directory_Subdirectory: [Directory!]
}

type File {
  name: String!
  path: String!
  extension: String
}
"""


def is_known_type(type_name: str) -> bool:
    """Check whether a vertex type is declared by the schema."""
    return type_name in PROPERTIES


def edge_target(type_name: str, edge_name: str):
    """Return the target type of an edge, or None if it is not declared."""
    return EDGES.get((type_name, edge_name))
