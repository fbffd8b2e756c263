"""
Internationalization (i18n) for codec messages.

Loads message catalogues dynamically:
1. Shared files from resources/i18n/*.json (language-agnostic: log lines)
2. Locale-specific files from resources/i18n/{locale}/*.json (errors, CLI)
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from steamid_codec.utils.paths import get_resources_dir

__all__ = ["I18n", "get_language", "init_i18n", "t"]

logger = logging.getLogger("steamidcodec.i18n")


class I18n:
    """Message catalogue for one locale.

    Shared files from the resources/i18n/ root are merged with the English
    catalogue to form the fallback; a non-English locale is merged on top.
    """

    def __init__(self, locale: str = "en", i18n_root: Path | None = None) -> None:
        """Initialize I18n with a specific locale code.

        Args:
            locale: The locale code used to find the corresponding
                directory in resources/i18n/.
            i18n_root: Override for the catalogue directory (tests).
        """
        self.locale = locale
        self.translations: dict[str, Any] = {}
        self.fallback_translations: dict[str, Any] = {}
        self.i18n_root = i18n_root if i18n_root is not None else get_resources_dir() / "i18n"

        self._load_translations()

    def _load_translations(self) -> None:
        """Load shared + English as fallback, then overlay the target locale."""
        shared_data = self._load_json_directory(self.i18n_root)
        en_data = self._load_json_directory(self.i18n_root / "en")
        self.fallback_translations = self._deep_merge(shared_data, en_data)

        if self.locale != "en":
            target_data = self._load_json_directory(self.i18n_root / self.locale)
            self.translations = self._deep_merge(self.fallback_translations, target_data)
        else:
            self.translations = self.fallback_translations

    def _load_json_directory(self, directory: Path) -> dict[str, Any]:
        """Loads and deep-merges all JSON files from a directory.

        Args:
            directory: Path to scan for ``*.json`` files.

        Returns:
            Merged dictionary of all JSON files found.
        """
        merged: dict[str, Any] = {}
        if not directory.exists():
            return merged
        for file_path in sorted(directory.glob("*.json")):
            try:
                with open(file_path, "r", encoding="utf-8") as f:
                    merged = self._deep_merge(merged, json.load(f))
            except (OSError, json.JSONDecodeError) as e:
                logger.error("Error loading i18n file %s: %s", file_path.name, e)
        return merged

    def _deep_merge(self, base: dict[str, Any], update: dict[str, Any]) -> dict[str, Any]:
        """Recursive merge of dictionaries; values from update win."""
        result = base.copy()
        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def t(self, key: str, **kwargs: Any) -> str:
        """Retrieve a message by dot-notation key.

        Args:
            key: Dot-separated key path (e.g. 'errors.steam_id.unknown_format').
            **kwargs: Format arguments for string interpolation.

        Returns:
            Formatted message, or '[key]' if not found.
        """
        value: Any = self.translations
        for k in key.split("."):
            if not isinstance(value, dict):
                value = None
                break
            value = value.get(k)

        if not isinstance(value, str):
            return f"[{key}]"

        if kwargs:
            try:
                return value.format(**kwargs)
            except (ValueError, KeyError, IndexError):
                return value

        return value


_i18n_instance: I18n | None = None


def init_i18n(locale: str = "en") -> I18n:
    """Initialize the global i18n instance.

    Args:
        locale: The locale code to use.

    Returns:
        The initialized I18n instance.
    """
    global _i18n_instance
    _i18n_instance = I18n(locale)
    return _i18n_instance


def get_language() -> str:
    """Return the locale code of the global i18n instance."""
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.locale


def t(key: str, **kwargs: Any) -> str:
    """Retrieve a message using the global i18n instance.

    Args:
        key: Dot-separated key path.
        **kwargs: Format arguments for string interpolation.

    Returns:
        Formatted message, or '[key]' if not found.
    """
    if _i18n_instance is None:
        init_i18n()
    return _i18n_instance.t(key, **kwargs)
