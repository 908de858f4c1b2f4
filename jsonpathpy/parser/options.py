"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

from jsonpathpy.syntax import MAX_SAFE_INTEGER


class ParseMode(StrEnum):
    """Grammar profile.

    EXTENDED is the full grammar. RESTRICTED is the reduced rule set without
    descendant search or `[*]`, and with upper-case-only `\\u` hex digits.
    """

    EXTENDED = "extended"
    RESTRICTED = "restricted"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling which grammar productions are accepted."""

    mode: ParseMode = ParseMode.EXTENDED
    allow_descendant: bool = True
    allow_wildcard_index: bool = True
    allow_lowercase_hex_escapes: bool = True
    max_integer_magnitude: int = MAX_SAFE_INTEGER

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.RESTRICTED:
            return ParserOptions(
                mode=mode,
                allow_descendant=False,
                allow_wildcard_index=False,
                allow_lowercase_hex_escapes=False,
            )

        return ParserOptions(mode=mode)
