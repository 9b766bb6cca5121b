"""Translation storage, lookup and loading built on the MessageFormat engine.

Components:
    TranslationStore - In-memory per-locale translations (nested data flattened)
    MessageFormatBackend - Looks up keys and formats stored patterns
    FallbackChain - First-found-wins chain of backends
    load_translations - Loads YAML/JSON bundle files into a store
    Found / Missing - Tagged lookup results

Python 3.13+.
"""

from .backend import MessageFormatBackend
from .chain import FallbackChain, Translator
from .loading import load_translation_file, load_translations
from .store import TranslationStore, flatten_translations
from .types import Found, LocaleCode, LookupResult, Missing, TranslationData, TranslationKey

__all__ = [
    "FallbackChain",
    "Found",
    "LocaleCode",
    "LookupResult",
    "MessageFormatBackend",
    "Missing",
    "TranslationData",
    "TranslationKey",
    "TranslationStore",
    "Translator",
    "flatten_translations",
    "load_translation_file",
    "load_translations",
]
