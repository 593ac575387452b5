# schemaorg_ld/common/naming.py
from __future__ import annotations

RESERVED_SIGIL = "@"

# schema.org vocabulary that does not follow the camelCase convention
IRREGULAR_KEYS = {
    "queryInput": "query-input",
}


def snake_case_to_lower_camel_case(snake_case: str) -> str:
    words = str(snake_case).split("_")
    return "".join(w if i == 0 else w.capitalize() for i, w in enumerate(words))


def strip_sigil(identifier: str) -> str:
    return identifier[len(RESERVED_SIGIL):] if identifier.startswith(RESERVED_SIGIL) else identifier


def translate_attribute_name(identifier: str) -> str:
    """
    Translate an attribute identifier into its JSON-LD key.

    Examples:
        same_as       -> sameAs
        name          -> name
        @query_input  -> query-input
    """
    key = snake_case_to_lower_camel_case(strip_sigil(identifier))
    return IRREGULAR_KEYS.get(key, key)
