from typing import Any, Optional

from dotpath.dotpath_datatypes import PropertyPath, is_mapping


class PathResolver:
    """Handles read traversal of an object graph.

    A lookup that falls off the graph (missing key, None or a scalar
    in the middle of the path) yields None. Note that a path whose final
    value is stored as None reads the same as a path that does not exist.
    """

    def get(self, root: Any, path: Optional[str]) -> Any:
        """Resolves a dotted path against root and returns the value found there."""
        if root is None or not path:
            return None

        # Exact key first; this is also how keys containing '.' are read.
        if is_mapping(root) and path in root:
            return root[path]

        return self.walk(root, PropertyPath(path))

    def walk(self, root: Any, path: PropertyPath) -> Any:
        """Descends one token at a time, without the exact-key shortcut."""
        current = root
        for token in path:
            if not is_mapping(current):
                return None
            current = current.get(token)
            if current is None:
                return None
        return current
