from __future__ import annotations
import os
from typing import Optional, Any

import yaml

from dotpath.dotpath_datatypes import dbg


def _resolve_locator(locator: str, base_dir: Optional[str]) -> str:
    # Accepts 'file://...' locators or bare filesystem paths
    rest = locator[7:] if locator.startswith("file://") else locator
    if rest.startswith("/"):
        return "/" + rest.lstrip("/")
    if rest.startswith("~"):
        return os.path.expanduser(rest)
    base = base_dir or os.getcwd()
    if rest == "":
        return base
    return os.path.normpath(os.path.join(base, rest))


async def load_document(locator: str, *, base_dir: Optional[str] = None) -> Any:
    """Reads a YAML (or JSON) document into a plain object graph."""
    path = _resolve_locator(locator, base_dir)
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    dbg("load_document", path)
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f)


async def save_document(locator: str, value: Any, *, base_dir: Optional[str] = None) -> None:
    """Writes an object graph as YAML, creating parent directories as needed."""
    path = _resolve_locator(locator, base_dir)
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    dbg("save_document", path)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(value, f, sort_keys=False)
