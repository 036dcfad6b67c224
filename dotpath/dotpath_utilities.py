"""
Application helper service built around the path engine.

Besides the reflection helpers (value get/set and function lookup by dotted
path) this carries the small platform, string and category helpers that
screens and controllers share.
"""

import random
import re
import uuid
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Union

from dotpath.dotpath_datatypes import BoundFunction
from dotpath.dotpath_file import load_document, save_document
from dotpath.dotpath_functions import FunctionResolver, GLOBAL_SCOPE
from dotpath.dotpath_mutator import PathMutator
from dotpath.dotpath_resolver import PathResolver


@dataclass
class CategoryItem:
    name: str
    href: str
    icon: str
    order: int


class Preferences:
    """User preferences kept in a nested dict and addressed by dotted path."""

    CATEGORY_ORDER = "categoryOrder"

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values: Dict[str, Any] = values if values is not None else {}
        self._resolver = PathResolver()
        self._mutator = PathMutator()

    def get(self, path: str) -> Any:
        return self._resolver.get(self.values, path)

    def set(self, path: str, value: Any) -> None:
        self._mutator.set(self.values, path, value)

    @property
    def category_order(self) -> Optional[List[str]]:
        return self.get(self.CATEGORY_ORDER)

    @category_order.setter
    def category_order(self, names: Optional[List[str]]):
        self.set(self.CATEGORY_ORDER, names)

    @classmethod
    async def load(cls, locator: str, *, base_dir: Optional[str] = None) -> 'Preferences':
        values = await load_document(locator, base_dir=base_dir)
        if not isinstance(values, dict):
            raise TypeError(f"Preferences document must hold a mapping, got {type(values).__name__}")
        return cls(values)

    async def save(self, locator: str, *, base_dir: Optional[str] = None) -> None:
        await save_document(locator, self.values, base_dir=base_dir)


class Utilities:
    """Provides a common set of helper methods."""

    def __init__(self,
                 is_debug: bool = False,
                 is_emulator: bool = False,
                 device: Optional[Mapping[str, Any]] = None,
                 preferences: Optional[Preferences] = None,
                 global_scope: Any = None):
        self._is_debug = is_debug
        self._is_emulator = is_emulator
        self.device = device
        self.preferences = preferences or Preferences()
        self.path_resolver = PathResolver()
        self.path_mutator = PathMutator()
        self.function_resolver = FunctionResolver(
            global_scope if global_scope is not None else GLOBAL_SCOPE,
            self.path_resolver,
        )

    # -----------------------------------------------------------------
    # Platforms
    # -----------------------------------------------------------------

    @property
    def is_emulator(self) -> bool:
        """True when running inside a desktop emulator rather than on a device."""
        return self._is_emulator

    @property
    def is_debug_mode(self) -> bool:
        return self._is_debug

    def _platform_is(self, name: str) -> bool:
        return self.device is not None and self.device.get("platform") == name

    @property
    def is_android(self) -> bool:
        return self._platform_is("Android")

    @property
    def is_ios(self) -> bool:
        return self._platform_is("iOS")

    def is_windows_phone8(self) -> bool:
        return self._platform_is("WP8")

    def is_windows8(self) -> bool:
        return self._platform_is("Windows8")

    # -----------------------------------------------------------------
    # Strings
    # -----------------------------------------------------------------

    def ends_with(self, s: Optional[str], suffix: Optional[str]) -> bool:
        """False for an empty s; an empty suffix matches any non-empty s."""
        if not s:
            return False
        if not suffix:
            return True
        return s.endswith(suffix)

    def starts_with(self, s: Optional[str], prefix: Optional[str]) -> bool:
        """False for an empty s; an empty prefix matches any non-empty s."""
        if not s:
            return False
        if not prefix:
            return True
        return s.startswith(prefix)

    def to_title_case(self, s: Optional[str]) -> str:
        if not s:
            return ""
        return re.sub(r"\w\S*", lambda m: m.group(0)[0].upper() + m.group(0)[1:].lower(), s)

    def format(self, template: str, *args: Any) -> str:
        """Replaces {0}, {1}, ... in template with the matching argument.

        Utilities().format("Hello there {0}, it is {1} to meet you!", "dude", "nice")
        gives "Hello there dude, it is nice to meet you!". Braces that do not
        name an argument index are left alone. Arguments are converted with str(),
        so None renders as "None".
        """
        for i, arg in enumerate(args):
            template = template.replace("{%d}" % i, str(arg))
        return template

    # -----------------------------------------------------------------
    # Reflection
    # -----------------------------------------------------------------

    def get_value(self, obj: Any, path: Optional[str]) -> Any:
        return self.path_resolver.get(obj, path)

    def set_value(self, obj: Any, path: Optional[str], value: Any, instantiate: bool = True) -> None:
        self.path_mutator.set(obj, path, value, instantiate)

    def get_function(self, path: str, infer_context: bool = True) -> Optional[Union[BoundFunction, Callable[..., Any]]]:
        return self.function_resolver.resolve(path, infer_context)

    def get_scoped_function(self, scope: Any, path: str, infer_context: bool = True) -> Optional[Union[BoundFunction, Callable[..., Any]]]:
        return self.function_resolver.resolve_in(scope, path, infer_context)

    # -----------------------------------------------------------------
    # Misc
    # -----------------------------------------------------------------

    def get_random_number(self, lo: int, hi: int) -> int:
        """Random integer between lo and hi, both inclusive."""
        return random.randint(lo, hi)

    def generate_guid(self) -> str:
        """A GUID in the upper-case 8-4-4-4-12 form, e.g. D99A5596-5478-4BAA-9A42-3BC352DC9D56."""
        return str(uuid.uuid4()).upper()

    @property
    def categories(self) -> List[CategoryItem]:
        """The application's categories, ordered by the user's preference when one is stored."""
        categories = [
            CategoryItem(f"Category {n}", f"#/app/category/{n}", "ios-pricetags-outline", n - 1)
            for n in range(1, 5)
        ]

        order = self.preferences.category_order
        if order:
            by_name = {c.name: c for c in categories}
            for index, name in enumerate(order):
                item = by_name.get(name)
                if item is not None:
                    item.order = index

        return sorted(categories, key=lambda c: c.order)

    @property
    def default_category(self) -> CategoryItem:
        """The category in the first position."""
        return self.categories[0]
