"""Function registry and registration decorator.

A FunctionRegistry is the read-only mapping from upper-cased function name
to template function that a TemplateResolver dispatches through. Names are
normalized once at construction so lookups are a single dict access.

Registries are built either directly from a mapping:

    registry = FunctionRegistry({"plural": pluralize, "UPPERCASE": upper})

or collected with a FunctionSet and its @register decorator, which also
captures metadata for the API:

    functions = FunctionSet()

    @functions.register("PLURAL", category=Category.GRAMMAR)
    def pluralize(params, one="", many=""):
        return many if params.get("plural") else one

    registry = functions.build()
"""

import inspect
import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

from funcystr.core.types import TemplateFunction
from funcystr.exceptions import RegistryError

logger = logging.getLogger(__name__)


class Category(Enum):
    """Function categories for organization and documentation."""

    GRAMMAR = auto()  # pronoun, plural
    TEXT = auto()  # uppercase, reverse, repeat
    REMOTE = auto()  # fetchremote
    CUSTOM = auto()  # anything registered from a plain mapping


# Category display metadata for the API
CATEGORY_DISPLAY = {
    Category.GRAMMAR: {"label": "Grammar", "icon": "📝"},
    Category.TEXT: {"label": "Text", "icon": "🔤"},
    Category.REMOTE: {"label": "Remote Lookup", "icon": "🌐"},
    Category.CUSTOM: {"label": "Custom", "icon": "🧩"},
}


def normalize_name(name: str) -> str:
    """Normalize a function name to the registry's key convention."""
    return name.upper()


@dataclass(frozen=True)
class FunctionDefinition:
    """Complete definition of a template function."""

    name: str
    func: TemplateFunction
    category: Category = Category.CUSTOM
    description: str = ""
    examples: dict[str, str] | None = None  # template -> rendered output

    @property
    def is_async(self) -> bool:
        return inspect.iscoroutinefunction(self.func)


class FunctionRegistry:
    """Immutable name -> template function mapping.

    Safe to share between any number of concurrent resolutions; nothing
    mutates it after __init__.
    """

    def __init__(
        self,
        functions: "Mapping[str, TemplateFunction | FunctionDefinition] | None" = None,
    ):
        definitions: dict[str, FunctionDefinition] = {}
        for name, value in (functions or {}).items():
            if isinstance(value, FunctionDefinition):
                definition = value
            else:
                definition = FunctionDefinition(name=name, func=value)

            if not name:
                raise RegistryError("Function name must not be empty")
            if not callable(definition.func):
                raise RegistryError(
                    f"Function '{name}' is not callable: {definition.func!r}"
                )

            key = normalize_name(name)
            if key in definitions:
                raise RegistryError(
                    f"Function '{name}' collides with '{definitions[key].name}' "
                    f"(both normalize to '{key}')"
                )
            definitions[key] = definition

        self._definitions = MappingProxyType(definitions)
        logger.debug("[REGISTRY] Built registry with %d functions", len(definitions))

    @classmethod
    def coerce(
        cls, functions: "FunctionRegistry | Mapping[str, TemplateFunction] | None"
    ) -> "FunctionRegistry":
        """Return functions as a registry, building one from a mapping."""
        if isinstance(functions, FunctionRegistry):
            return functions
        return cls(functions)

    def get(self, name: str) -> TemplateFunction | None:
        """Look up a function by name, case-insensitively."""
        definition = self._definitions.get(normalize_name(name))
        return definition.func if definition else None

    def definition(self, name: str) -> FunctionDefinition | None:
        """Get the full definition for a name, case-insensitively."""
        return self._definitions.get(normalize_name(name))

    def all_functions(self) -> list[FunctionDefinition]:
        """Get all registered definitions."""
        return list(self._definitions.values())

    def by_category(self, category: Category) -> list[FunctionDefinition]:
        """Get all definitions in a category."""
        return [d for d in self._definitions.values() if d.category == category]

    def names(self) -> list[str]:
        """Get normalized names of all registered functions."""
        return list(self._definitions.keys())

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_name(name) in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)

    def to_api_format(self) -> dict:
        """Generate the response body for the /api/functions endpoint."""
        functions_list = []
        categories_seen = set()

        for key, definition in self._definitions.items():
            cat_info = CATEGORY_DISPLAY.get(
                definition.category,
                {"label": definition.category.name.title(), "icon": "📋"},
            )
            category_name = f"{cat_info['icon']} {cat_info['label']}"
            categories_seen.add(category_name)

            entry = {
                "name": key,
                "description": definition.description,
                "category": category_name,
                "is_async": definition.is_async,
            }
            if definition.examples:
                entry["examples"] = definition.examples
            functions_list.append(entry)

        # Sort by category then name for consistent output
        functions_list.sort(key=lambda f: (f["category"], f["name"]))

        return {
            "total_functions": len(functions_list),
            "categories": sorted(categories_seen),
            "functions": functions_list,
        }


class FunctionSet:
    """Mutable collection of definitions, frozen into a FunctionRegistry.

    Registration happens at import time via the @register decorator;
    build() produces the immutable registry handed to a resolver.
    """

    def __init__(self):
        self._definitions: dict[str, FunctionDefinition] = {}

    def register(
        self,
        name: str,
        category: Category = Category.CUSTOM,
        description: str = "",
        examples: dict[str, str] | None = None,
    ) -> Callable[[TemplateFunction], TemplateFunction]:
        """Decorator to register a template function.

        Usage:
            @functions.register(
                name="UPPERCASE",
                category=Category.TEXT,
                description="Upper-case the argument",
                examples={"{{UPPERCASE|abc}}": "ABC"},
            )
            def uppercase(params, text=""):
                return text.upper()
        """

        def decorator(func: TemplateFunction) -> TemplateFunction:
            key = normalize_name(name)
            if key in self._definitions:
                logger.warning("[REGISTRY] Function '%s' already registered, overwriting", key)
            self._definitions[key] = FunctionDefinition(
                name=key,
                func=func,
                category=category,
                description=description,
                examples=examples,
            )
            return func

        return decorator

    def build(self) -> FunctionRegistry:
        """Freeze the collected definitions into a registry."""
        return FunctionRegistry(dict(self._definitions))

    def __len__(self) -> int:
        return len(self._definitions)
