from typing import Any, Optional

from dotpath.dotpath_datatypes import PropertyPath, is_mapping, is_mutable_mapping


class PathMutator:
    """Handles write traversal of an object graph.

    Unlike PathResolver.get there is no exact-key shortcut: set(root, "a.b", v)
    always writes root["a"]["b"], even when root already holds a key "a.b".
    """

    def set(self, root: Any, path: Optional[str], value: Any, instantiate: bool = True) -> None:
        """Writes value at path, creating missing intermediate dicts when instantiate is true.

        An intermediate that is None or a falsy scalar (0, "", False) counts
        as missing. With instantiate false a missing intermediate aborts the
        write and leaves root untouched. A truthy scalar intermediate cannot
        hold properties, so the write is dropped.
        """
        if root is None or not path:
            return
        if not is_mutable_mapping(root):
            return

        tokens = PropertyPath(path).tokens
        container = root
        for token in tokens[:-1]:
            child = container.get(token)
            if child is None or (not child and not is_mapping(child)):
                if not instantiate:
                    return
                child = {}
                container[token] = child
            elif not is_mutable_mapping(child):
                return
            container = child

        container[tokens[-1]] = value
