"""steamid-codec: parse, render and validate Steam identifiers."""

from __future__ import annotations

from steamid_codec.core.steam_id import SteamID
from steamid_codec.utils.steamid_constants import (
    EChatInstanceFlag,
    EInstance,
    EType,
    EUniverse,
    FormatError,
    SteamIDError,
    SteamIDFormat,
    UnsupportedRenderError,
)
from steamid_codec.version import __version__

__all__ = [
    "EChatInstanceFlag",
    "EInstance",
    "EType",
    "EUniverse",
    "FormatError",
    "SteamID",
    "SteamIDError",
    "SteamIDFormat",
    "UnsupportedRenderError",
    "__version__",
]
