from typing import Any, Callable, Dict, Optional, Union

from dotpath.dotpath_datatypes import BoundFunction, PropertyPath
from dotpath.dotpath_resolver import PathResolver

# Process-wide scope used when no scope is given; register handlers here.
GLOBAL_SCOPE: Dict[str, Any] = {}


class FunctionResolver:
    """Resolves dotted paths to callables, optionally bound to the object that owns them.

    Given "something.else.handler", the callable is read from that path and,
    when context inference is on, wrapped so that it runs with the object at
    "something.else" as its receiver. A path without a '.' runs against the
    scope it was resolved in. This lets handler names arrive as plain strings
    (from configuration, from a server) without a registry of pre-bound
    closures.

    The scope used by resolve() is injected here rather than looked up from
    global state; resolve_in() takes the scope explicitly.
    """

    def __init__(self, default_scope: Any, path_resolver: Optional[PathResolver] = None):
        self.default_scope = default_scope
        self.path_resolver = path_resolver or PathResolver()

    def resolve(self, path: str, infer_context: bool = True) -> Optional[Union[BoundFunction, Callable[..., Any]]]:
        """Resolves path against the default scope."""
        return self.resolve_in(self.default_scope, path, infer_context)

    def resolve_in(self, scope: Any, path: str, infer_context: bool = True) -> Optional[Union[BoundFunction, Callable[..., Any]]]:
        """Resolves path against scope.

        Returns None when nothing callable lives at path. With infer_context
        false the raw callable is returned as found.
        """
        fn = self.path_resolver.get(scope, path)
        if fn is None or not callable(fn):
            return None

        if not infer_context:
            return fn

        return BoundFunction(fn, self.infer_context(scope, path))

    def infer_context(self, scope: Any, path: str) -> Any:
        """Returns the receiver for the function at path: its owner, or scope itself."""
        context_path = PropertyPath(path).context()
        if context_path is None:
            return scope
        return self.path_resolver.get(scope, context_path.text)
