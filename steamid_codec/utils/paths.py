"""Path resolution for bundled resources.

The resources directory ships inside the package, so it is found next to
the package whether running from a checkout or from an installed wheel.
"""

from __future__ import annotations

import sys
from pathlib import Path

__all__ = ["get_resources_dir"]

_resources_dir: Path | None = None


def get_resources_dir() -> Path:
    """Get the path to the resources directory.

    Checks, in order:
    1. steamid_codec/resources/ relative to this file (checkout + pip install)
    2. sys.prefix/share/steamid_codec/resources (data-files installs)

    Returns:
        Path to the resources directory.

    Raises:
        FileNotFoundError: If resources directory cannot be found.
    """
    global _resources_dir
    if _resources_dir is not None:
        return _resources_dir

    # paths.py is at steamid_codec/utils/paths.py -> parent.parent = steamid_codec/
    candidate = Path(__file__).resolve().parent.parent / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    candidate = Path(sys.prefix) / "share" / "steamid_codec" / "resources"
    if candidate.is_dir():
        _resources_dir = candidate
        return _resources_dir

    raise FileNotFoundError(
        "Could not locate resources directory. "
        "Searched: steamid_codec/resources/, sys.prefix/share/steamid_codec/resources/"
    )
