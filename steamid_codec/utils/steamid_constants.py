# steamid_codec/utils/steamid_constants.py

"""Constants for the SteamID bit layout and its textual notations.

Holds the field enums, the Steam3 type-letter tables, the packing masks
and shifts, and the error types raised by the codec.
"""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag

from steamid_codec.utils.i18n import t

__all__ = [
    "ACCOUNT_ID_MASK",
    "ACCOUNT_INSTANCE_MASK",
    "CHAR_TO_TYPE",
    "EChatInstanceFlag",
    "EInstance",
    "EType",
    "EUniverse",
    "FormatError",
    "INSTANCE_SHIFT",
    "SteamIDError",
    "SteamIDFormat",
    "TYPE_MASK",
    "TYPE_SHIFT",
    "TYPE_TO_CHAR",
    "UNIVERSE_MASK",
    "UNIVERSE_SHIFT",
    "UNKNOWN_TYPE_CHAR",
    "UINT64_MAX",
    "UnsupportedRenderError",
]


# ===== FIELD ENUMS =====


class EUniverse(IntEnum):
    """Steam Universe identifiers.

    Defines the Steam environment (deployment partition) an ID belongs to.
    """

    Invalid = 0
    Public = 1
    Beta = 2
    Internal = 3
    Dev = 4


class EType(IntEnum):
    """Steam account types (the 4-bit type field)."""

    Invalid = 0
    Individual = 1
    Multiseat = 2
    GameServer = 3
    AnonGameServer = 4
    Pending = 5
    ContentServer = 6
    Clan = 7
    Chat = 8
    P2PSuperSeeder = 9
    AnonUser = 10


class EInstance(IntEnum):
    """Well-known values of the 20-bit instance field."""

    All = 0
    Desktop = 1
    Console = 2
    Web = 4


# ===== BIT LAYOUT =====

ACCOUNT_ID_MASK: int = 0xFFFFFFFF
"""Low 32 bits: the account id."""

ACCOUNT_INSTANCE_MASK: int = 0x000FFFFF
"""20-bit instance field (after shifting down by INSTANCE_SHIFT)."""

TYPE_MASK: int = 0xF
UNIVERSE_MASK: int = 0xFF

INSTANCE_SHIFT: int = 32
TYPE_SHIFT: int = 52
UNIVERSE_SHIFT: int = 56

UINT64_MAX: int = 0xFFFFFFFFFFFFFFFF


class EChatInstanceFlag(IntFlag):
    """Flags stored in the top bits of the instance field of chat IDs."""

    Clan = (ACCOUNT_INSTANCE_MASK + 1) >> 1  # 0x80000
    Lobby = (ACCOUNT_INSTANCE_MASK + 1) >> 2  # 0x40000
    MMSLobby = (ACCOUNT_INSTANCE_MASK + 1) >> 3  # 0x20000


# ===== STEAM3 TYPE LETTERS =====

TYPE_TO_CHAR: dict[int, str] = {
    EType.Invalid: "I",
    EType.Individual: "U",
    EType.Multiseat: "M",
    EType.GameServer: "G",
    EType.AnonGameServer: "A",
    EType.Pending: "P",
    EType.ContentServer: "C",
    EType.Clan: "g",
    EType.Chat: "T",
    EType.AnonUser: "a",
}
"""Steam3 letter for each account type. P2PSuperSeeder has no letter."""

CHAR_TO_TYPE: dict[str, EType] = {char: EType(type_id) for type_id, char in TYPE_TO_CHAR.items()}

UNKNOWN_TYPE_CHAR: str = "i"
"""Letter rendered for types missing from TYPE_TO_CHAR."""


class SteamIDFormat(Enum):
    """Notation a SteamID was created from (provenance only)."""

    NONE = "none"
    STEAM2 = "steam2"
    STEAM3 = "steam3"
    STEAM64 = "steam64"
    ACCOUNT_ID = "accountid"


# ===== EXCEPTIONS =====


class SteamIDError(ValueError):
    """Base class for all errors raised by the SteamID codec."""


class FormatError(SteamIDError):
    """Raised when an input matches none of the known SteamID notations.

    Attributes:
        value: The raw input that could not be parsed.
    """

    def __init__(self, value: object):
        """Initializes the exception.

        Args:
            value: The raw input that could not be parsed.
        """
        self.value = value
        super().__init__(t("errors.steam_id.unknown_format", value=value))


class UnsupportedRenderError(SteamIDError):
    """Raised when a SteamID cannot be rendered in the requested notation.

    Attributes:
        steam_type: The numeric account type of the offending ID.
    """

    def __init__(self, steam_type: int):
        """Initializes the exception.

        Args:
            steam_type: The numeric account type of the offending ID.
        """
        self.steam_type = steam_type
        super().__init__(t("errors.steam_id.steam2_non_individual", type=steam_type))
