from dotpath.dotpath_datatypes import PropertyPath, BoundFunction
from dotpath.dotpath_resolver import PathResolver
from dotpath.dotpath_mutator import PathMutator
from dotpath.dotpath_functions import FunctionResolver, GLOBAL_SCOPE
from dotpath.dotpath_utilities import Utilities, Preferences, CategoryItem

_resolver = PathResolver()
_mutator = PathMutator()
_functions = FunctionResolver(GLOBAL_SCOPE, _resolver)


def get_value(root, path):
    return _resolver.get(root, path)


def set_value(root, path, value, instantiate=True):
    _mutator.set(root, path, value, instantiate)


def get_function(path, infer_context=True):
    return _functions.resolve(path, infer_context)


def get_scoped_function(scope, path, infer_context=True):
    return _functions.resolve_in(scope, path, infer_context)


__all__ = [
    "GLOBAL_SCOPE",
    "get_value",
    "set_value",
    "get_function",
    "get_scoped_function",
    "PropertyPath",
    "BoundFunction",
    "PathResolver",
    "PathMutator",
    "FunctionResolver",
    "Utilities",
    "Preferences",
    "CategoryItem",
]
