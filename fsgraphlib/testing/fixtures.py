"""Test fixtures for fsgraphlib consumers.

build_tree creates a directory tree on disk from a nested dict so tests can
describe their fixtures declaratively:

    build_tree(root, {
        "a": {"x.txt": "hello"},
        "b": "",
        ".git": {},
    })

Dict values become directories; str or bytes values become files with that
content.
"""

from pathlib import Path
from typing import Dict, Mapping, Union

TreeLayout = Mapping[str, Union["TreeLayout", str, bytes]]


def build_tree(root: Union[str, Path], layout: TreeLayout) -> Path:
    """Create the files and directories described by layout under root.

    Args:
        root: Existing directory to build into
        layout: Nested mapping of names to contents

    Returns:
        The root as a Path
    """
    root = Path(root)
    for name, content in layout.items():
        target = root / name
        if isinstance(content, dict):
            target.mkdir(exist_ok=True)
            build_tree(target, content)
        elif isinstance(content, bytes):
            target.write_bytes(content)
        else:
            target.write_text(content)
    return root


def tree_listing(root: Union[str, Path]) -> Dict[str, str]:
    """Map every entry below root to 'dir' or 'file', keyed by relative path.

    Useful as an oracle when comparing adapter output to what is on disk.
    Paths use the platform separator, matching vertex paths.
    """
    root = Path(root)
    listing = {}
    for path in sorted(root.rglob("*")):
        if path.is_symlink():
            continue
        relative = str(path.relative_to(root))
        if path.is_dir():
            listing[relative] = "dir"
        elif path.is_file():
            listing[relative] = "file"
    return listing
