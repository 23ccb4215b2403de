"""Grammar functions: pronoun and plural selection.

Choices come from the call params:
- params["pronoun"]: 'he', 'she', anything else selects the neutral form
- params["plural"]: truthy selects the plural form
- params["char_name"]: the character name
"""

from funcystr.core.types import Params
from funcystr.functions.base import builtin_functions
from funcystr.resolver.registry import Category


@builtin_functions.register(
    name="PRONOUN",
    category=Category.GRAMMAR,
    description="Pick the he/she/they form by params['pronoun']",
    examples={"{{PRONOUN|He|She|They}} left": "They left"},
)
def pronoun(params: Params, he: str = "", she: str = "", they: str = "") -> str:
    choice = params.get("pronoun")
    if choice == "he":
        return he
    if choice == "she":
        return she
    return they


@builtin_functions.register(
    name="PLURAL",
    category=Category.GRAMMAR,
    description="Pick the singular or plural form by params['plural']",
    examples={"one {{PLURAL|apple|apples}}": "one apple"},
)
def plural(params: Params, one: str = "", many: str = "") -> str:
    return many if params.get("plural") else one


@builtin_functions.register(
    name="CHAR_NAME",
    category=Category.GRAMMAR,
    description="The character name from params['char_name']",
)
def char_name(params: Params) -> str:
    return params.get("char_name") or ""
