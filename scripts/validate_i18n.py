#!/usr/bin/env python3
"""Validate the steamid-codec message catalogues.

Standalone CI script (stdlib only). Checks JSON syntax, that every locale
defines the same keys as English, that no message is empty, and that
translated messages use the same ``{placeholders}`` as the English text
(a missing placeholder silently drops the value from the message).

Exit code 0 = all checks passed, 1 = at least one failure.
"""

from __future__ import annotations

import json
import string
import sys
from pathlib import Path

__all__: list[str] = []

REPO_ROOT = Path(__file__).resolve().parent.parent
I18N_DIR = REPO_ROOT / "steamid_codec" / "resources" / "i18n"
REFERENCE_LOCALE = "en"
SHARED_FILES = ["logs.json"]


def flatten_messages(data: dict, prefix: str = "") -> dict[str, object]:
    """Flatten a nested catalogue into ``{"a.b.c": value}``."""
    flat: dict[str, object] = {}
    for k, v in data.items():
        full_key = f"{prefix}.{k}" if prefix else k
        if isinstance(v, dict):
            flat.update(flatten_messages(v, full_key))
        else:
            flat[full_key] = v
    return flat


def placeholders(message: str) -> set[str]:
    """Return the named ``str.format`` fields used in a message."""
    return {name for _, name, _, _ in string.Formatter().parse(message) if name}


def load_catalogue(path: Path, errors: list[str]) -> dict[str, object] | None:
    try:
        return flatten_messages(json.loads(path.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError) as exc:
        errors.append(f"  {path.name}: {exc}")
        return None


def check_shared(i18n_dir: Path) -> list[str]:
    """Shared (untranslated) files must exist, parse and have no empty messages."""
    errors: list[str] = []
    for name in SHARED_FILES:
        path = i18n_dir / name
        if not path.exists():
            errors.append(f"  Missing shared file: {name}")
            continue
        messages = load_catalogue(path, errors)
        if messages is None:
            continue
        if not messages:
            errors.append(f"  {name}: file is empty")
        errors.extend(f"  {name}: empty value for '{key}'" for key, value in messages.items() if value == "")
    return errors


def check_locales(i18n_dir: Path) -> list[str]:
    """Every locale must mirror the reference locale file by file, key by key."""
    errors: list[str] = []
    ref_dir = i18n_dir / REFERENCE_LOCALE
    if not ref_dir.is_dir():
        return [f"  Missing reference locale directory: {REFERENCE_LOCALE}/"]

    locales = sorted(p.name for p in i18n_dir.iterdir() if p.is_dir())
    ref_files = {p.name for p in ref_dir.glob("*.json")}

    for locale in locales:
        locale_dir = i18n_dir / locale
        files = {p.name for p in locale_dir.glob("*.json")}
        for name in sorted(ref_files - files):
            errors.append(f"  {locale}/: missing {name}")
        for name in sorted(files - ref_files):
            errors.append(f"  {locale}/: unexpected {name}")

        for name in sorted(files & ref_files):
            ref = load_catalogue(ref_dir / name, errors)
            other = load_catalogue(locale_dir / name, errors)
            if ref is None or other is None:
                continue

            for key in sorted(ref.keys() - other.keys()):
                errors.append(f"  {locale}/{name}: missing key {key}")
            for key in sorted(other.keys() - ref.keys()):
                errors.append(f"  {locale}/{name}: unknown key {key}")

            for key in sorted(ref.keys() & other.keys()):
                value = other[key]
                if value == "":
                    errors.append(f"  {locale}/{name}: empty value for '{key}'")
                elif isinstance(value, str) and isinstance(ref[key], str):
                    if placeholders(value) != placeholders(ref[key]):
                        errors.append(f"  {locale}/{name}: placeholders of '{key}' differ from {REFERENCE_LOCALE}")

    return errors


def main(i18n_dir: Path = I18N_DIR) -> int:
    """Run all checks and report results.

    Returns:
        Exit code: 0 if all checks succeeded, 1 otherwise.
    """
    print("=== i18n Validation ===")  # noqa: T201

    failed = 0
    for label, check in (("Shared files", check_shared), ("Locales", check_locales)):
        errors = check(i18n_dir)
        if errors:
            failed += 1
            print(f"[FAIL] {label}: {len(errors)} issue(s)")  # noqa: T201
            for line in errors:
                print(line)  # noqa: T201
        else:
            print(f"[PASS] {label}")  # noqa: T201

    print()  # noqa: T201
    if failed == 0:
        print("=== RESULT: PASS ===")  # noqa: T201
        return 0

    print(f"=== RESULT: FAIL ({failed} check{'s' if failed != 1 else ''}) ===")  # noqa: T201
    return 1


if __name__ == "__main__":
    sys.exit(main())
