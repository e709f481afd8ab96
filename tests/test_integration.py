"""Integration tests for fsgraphlib.

Drives FilesystemGraphAdapter end to end, both through the high-level
helpers in fsgraphlib.api and by chaining resolve_* calls the way a query
interpreter does.
"""

import os
import shutil
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fsgraphlib import (
    DataContext,
    DirectoryVertex,
    FilesystemGraphAdapter,
    FileVertex,
    ScanConfig,
    UnsupportedOperationError,
    collect_properties,
    iter_vertices,
    walk,
)
from fsgraphlib.testing import build_tree, tree_listing

SUBDIRECTORY = "out_Directory_Subdirectory"
CONTAINS_FILE = "out_Directory_ContainsFile"


class TestDocumentedTraversals(unittest.TestCase):
    """root/ holds a/x.txt and a file b without an extension."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        build_tree(self.test_dir, {"a": {"x.txt": "x"}, "b": ""})
        self.adapter = FilesystemGraphAdapter(self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def test_subdirectory_then_files(self):
        files = list(iter_vertices(self.adapter, SUBDIRECTORY, CONTAINS_FILE))
        self.assertEqual(files, [FileVertex(name="x.txt", extension="txt", path=os.path.join("a", "x.txt"))])

    def test_files_of_origin(self):
        files = list(iter_vertices(self.adapter, CONTAINS_FILE))
        self.assertEqual(files, [FileVertex(name="b", extension=None, path="b")])

    def test_no_edges_yields_origin(self):
        self.assertEqual(list(iter_vertices(self.adapter)), [DirectoryVertex.origin()])

    def test_manual_interpreter_chain(self):
        """Chain the resolver calls directly, as an interpreter would."""
        origin = self.adapter.resolve_starting_vertices("OriginDirectory", {})
        contexts = [DataContext(v) for v in origin]

        subdirectories = []
        for context, neighbors in self.adapter.resolve_neighbors(contexts, "Directory", SUBDIRECTORY, {}):
            subdirectories.extend(context.move_to(n) for n in neighbors)

        files = []
        for context, neighbors in self.adapter.resolve_neighbors(subdirectories, "Directory", CONTAINS_FILE, {}):
            files.extend(context.move_to(n) for n in neighbors)

        rows = [
            (value, ext)
            for (_, value), (_, ext) in zip(
                self.adapter.resolve_property(files, "File", "path"),
                self.adapter.resolve_property(files, "File", "extension"),
            )
        ]
        self.assertEqual(rows, [(os.path.join("a", "x.txt"), "txt")])

    def test_collect_properties(self):
        files = list(iter_vertices(self.adapter, SUBDIRECTORY, CONTAINS_FILE))
        rows = collect_properties(self.adapter, files, "File", "name", "extension", "__typename")
        self.assertEqual(rows, [{"name": "x.txt", "extension": "txt", "__typename": "File"}])

    def test_collect_properties_with_absent_vertex(self):
        rows = collect_properties(self.adapter, [None, DirectoryVertex.origin()], "Directory", "path")
        self.assertEqual(rows, [{"path": None}, {"path": ""}])

    def test_undeclared_edge_rejected_up_front(self):
        with self.assertRaises(UnsupportedOperationError):
            iter_vertices(self.adapter, CONTAINS_FILE, SUBDIRECTORY)


class TestWalk(unittest.TestCase):
    """walk() reaches every non-excluded entry exactly once."""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        build_tree(self.test_dir, {
            "README.md": "# readme",
            "src": {
                "main.py": "print()",
                "pkg": {"__init__.py": "", "util.py": ""},
            },
            "docs": {"index.rst": ""},
            ".git": {"HEAD": "", "objects": {"ab": {"cdef": ""}}},
            ".vscode": {"settings.json": "{}"},
            "target": {"debug": {"app": ""}},
        })
        self.adapter = FilesystemGraphAdapter(self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def _expected(self, excluded):
        listing = tree_listing(self.test_dir)
        return {
            path: kind for path, kind in listing.items()
            if Path(path).parts[0] not in excluded
        }

    def test_walk_matches_disk(self):
        seen = {}
        for vertex in walk(self.adapter):
            if vertex == DirectoryVertex.origin():
                continue
            self.assertNotIn(vertex.path, seen)
            seen[vertex.path] = "dir" if isinstance(vertex, DirectoryVertex) else "file"

        self.assertEqual(seen, self._expected({".git", ".vscode", "target"}))

    def test_walk_with_custom_exclusions(self):
        adapter = FilesystemGraphAdapter(self.test_dir, ScanConfig(excluded_directories={"src"}))
        paths = {v.path for v in walk(adapter) if v.path}
        self.assertEqual(paths, set(self._expected({"src"})))

    def test_walk_is_preorder(self):
        order = [v.path for v in walk(self.adapter)]
        self.assertEqual(order[0], "")
        for path in order[1:]:
            parent = os.path.dirname(path)
            self.assertLess(order.index(parent), order.index(path))

    def test_every_path_joins_parent_and_name(self):
        for vertex in walk(self.adapter):
            if vertex.path:
                self.assertEqual(vertex.path, os.path.join(os.path.dirname(vertex.path), vertex.name))

    def test_walk_can_be_abandoned(self):
        walker = walk(self.adapter)
        next(walker)
        next(walker)
        walker.close()


if __name__ == "__main__":
    unittest.main()
