"""Translation bundle loading from YAML and JSON files.

A bundle file is a YAML or JSON document whose top-level keys are locale
codes, each mapping to a (possibly nested) mapping of translations:

    en:
      greeting: "Hello {name}!"
      cart:
        items: "{count, plural, one {# item} other {# items}}"

Files ending in .json are read with json; every other file is read with
yaml.safe_load (JSON documents are valid YAML too).

Python 3.13+. External dependency: PyYAML.
"""

import glob
import json
import logging
from collections.abc import Mapping
from pathlib import Path

import yaml

from icumessageformat.localization.store import TranslationStore

__all__ = ["load_translation_file", "load_translations"]

logger = logging.getLogger(__name__)

_JSON_SUFFIX = ".json"


def _read_document(path: Path) -> object:
    with path.open(encoding="utf-8") as f:
        if path.suffix == _JSON_SUFFIX:
            return json.load(f)
        return yaml.safe_load(f)


def load_translation_file(store: TranslationStore, path: str | Path) -> tuple[str, ...]:
    """Load one bundle file into store.

    Args:
        store: Store to merge translations into
        path: YAML or JSON bundle file

    Returns:
        Locale codes found in the file

    Raises:
        OSError: File cannot be read
        yaml.YAMLError, json.JSONDecodeError: File is not valid YAML/JSON
        ValueError: Document is not a mapping of locale → mapping
    """
    path = Path(path)
    try:
        document = _read_document(path)
        if document is None:
            document = {}
        if not isinstance(document, Mapping):
            msg = f"{path}: top level must map locale codes to translations"
            raise ValueError(msg)

        locales: list[str] = []
        for locale, translations in document.items():
            if not isinstance(translations, Mapping):
                msg = f"{path}: translations for locale '{locale}' must be a mapping"
                raise ValueError(msg)
            store.store_translations(str(locale), translations)
            locales.append(str(locale))
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Failed to load translations from %s: %s", path, e)
        raise

    logger.info("Loaded translations for %s from %s", ", ".join(locales) or "no locales", path)
    return tuple(locales)


def load_translations(store: TranslationStore, *glob_patterns: str) -> tuple[Path, ...]:
    """Load every bundle file matching the glob patterns into store.

    Patterns are expanded with glob (``**`` matches directories
    recursively); files within one pattern load in sorted order, patterns
    in the order given, and later files override earlier ones key by key.

    Args:
        store: Store to merge translations into
        *glob_patterns: Patterns such as "config/locales/**/*.yml"

    Returns:
        Paths of the files loaded

    Example:
        >>> store = TranslationStore()
        >>> load_translations(store, "locales/*.yml", "locales/*.json")
        (PosixPath('locales/en.yml'), PosixPath('locales/fr.json'))
    """
    loaded: list[Path] = []
    for pattern in glob_patterns:
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match)
            if not path.is_file():
                continue
            load_translation_file(store, path)
            loaded.append(path)
    return tuple(loaded)
