"""Language-keyed registry of conversation scripts.

The registry is built once at import and is read-only afterwards.
"""

from types import MappingProxyType

from outreach.models.call import Language

from . import english, hindi, marathi
from .base import ConversationScript, RenderedScript

SCRIPTS = MappingProxyType({
    Language.HINDI: hindi.SCRIPT,
    Language.ENGLISH: english.SCRIPT,
    Language.MARATHI: marathi.SCRIPT,
})


def get_script(language: "Language | str | None") -> ConversationScript:
    """Return the script for ``language``; unknown tags get the Hindi script."""
    if not isinstance(language, Language):
        language = Language.resolve(language)
    return SCRIPTS[language]


__all__ = ["ConversationScript", "RenderedScript", "SCRIPTS", "get_script"]
