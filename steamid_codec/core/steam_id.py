"""
SteamID value type.

This module defines the SteamID dataclass which packs a universe, an account
type, an instance and a 32-bit account id into one unsigned 64-bit value, and
converts it to and from the Steam2 ("STEAM_0:0:23071901"), Steam3
("[U:1:46143802]") and Steam64 ("76561198006409530") notations.
"""

from __future__ import annotations

import dataclasses
import logging
import re
from dataclasses import dataclass, field

from steamid_codec.utils.i18n import t
from steamid_codec.utils.steamid_constants import (
    ACCOUNT_ID_MASK,
    ACCOUNT_INSTANCE_MASK,
    CHAR_TO_TYPE,
    INSTANCE_SHIFT,
    TYPE_MASK,
    TYPE_SHIFT,
    TYPE_TO_CHAR,
    UINT64_MAX,
    UNIVERSE_MASK,
    UNIVERSE_SHIFT,
    UNKNOWN_TYPE_CHAR,
    EChatInstanceFlag,
    EInstance,
    EType,
    EUniverse,
    FormatError,
    SteamIDFormat,
    UnsupportedRenderError,
)

logger = logging.getLogger("steamidcodec.steam_id")

__all__ = ["SteamID"]

_STEAM2_RE = re.compile(r"STEAM_([0-5]):([0-1]):([0-9]+)")
_STEAM3_RE = re.compile(r"\[([a-zA-Z]):([0-5]):([0-9]+)(?::([0-9]+))?\]")
_STEAM64_RE = re.compile(r"[0-9]+")
_ACCOUNT_ID_RE = re.compile(r"\s*([+-]?[0-9]+)\s*")


def _member_name(enum_cls: type[EUniverse] | type[EType] | type[EInstance], value: int) -> str | None:
    try:
        return enum_cls(value).name
    except ValueError:
        return None


def _digits(text: str, raw: str) -> int:
    """Convert a matched digit group, reporting oversized numbers as FormatError."""
    try:
        return int(text)
    except ValueError as e:
        # int() refuses strings beyond sys.get_int_max_str_digits()
        raise FormatError(raw) from e


def _masked(name: str, value: int, mask: int, bits: int) -> int:
    """Clip a field to its width before packing, logging when bits are lost."""
    masked = value & mask
    if masked != value:
        logger.warning(t("logs.steam_id.field_masked", field=name, value=value, bits=bits, masked=masked))
    return masked


@dataclass(frozen=True)
class SteamID:
    """A Steam identifier.

    Fields are plain integers so that out-of-range values survive a parse and
    can be reported by is_valid(). ``format`` records which notation produced
    the value; it does not take part in equality or hashing.

    Attributes:
        universe: 8-bit deployment partition (see EUniverse).
        type: 4-bit account type (see EType).
        instance: 20-bit instance; chat IDs keep EChatInstanceFlag bits here.
        account_id: 32-bit account id within (universe, type).
        format: Notation the value was parsed from.
    """

    universe: int = EUniverse.Invalid.value
    type: int = EType.Invalid.value
    instance: int = EInstance.All.value
    account_id: int = 0
    format: SteamIDFormat = field(default=SteamIDFormat.NONE, compare=False)

    def __post_init__(self) -> None:
        # store enum members as plain ints so rendering never sees "EType.Chat"
        for name in ("universe", "type", "instance", "account_id"):
            object.__setattr__(self, name, int(getattr(self, name)))

    # ----------------------------------------------------------------
    # Parsing
    # ----------------------------------------------------------------

    @classmethod
    def parse(cls, value: str | int) -> SteamID:
        """Parse any supported notation.

        Tries Steam2, then Steam3, then a bare Steam64 number.

        Args:
            value: A Steam2/Steam3/Steam64 string, or a Steam64 integer.

        Returns:
            The decoded SteamID.

        Raises:
            FormatError: If the input matches none of the notations.
        """
        if isinstance(value, bool):
            raise FormatError(value)

        if isinstance(value, int):
            return cls.from_steam64(value)

        if not isinstance(value, str):
            raise FormatError(value)

        match = _STEAM2_RE.fullmatch(value)
        if match:
            return cls._from_steam2_match(match)

        match = _STEAM3_RE.fullmatch(value)
        if match:
            return cls._from_steam3_match(match)

        if _STEAM64_RE.fullmatch(value):
            return cls.from_steam64(_digits(value, value))

        raise FormatError(value)

    @classmethod
    def _from_steam2_match(cls, match: re.Match[str]) -> SteamID:
        universe = int(match.group(1))
        auth_server = int(match.group(2))
        half = _digits(match.group(3), match.string)
        return cls(
            # STEAM_0 is the historical spelling of the public universe
            universe=universe or EUniverse.Public.value,
            type=EType.Individual.value,
            instance=EInstance.Desktop.value,
            account_id=half * 2 + auth_server,
            format=SteamIDFormat.STEAM2,
        )

    @classmethod
    def _from_steam3_match(cls, match: re.Match[str]) -> SteamID:
        char, universe, account_id, instance_str = match.groups()

        if instance_str is not None:
            instance = _digits(instance_str, match.string)
        elif char == "U":
            instance = EInstance.Desktop.value
        else:
            instance = EInstance.All.value

        if char == "c":
            instance |= EChatInstanceFlag.Clan.value
            steam_type = EType.Chat.value
        elif char == "L":
            instance |= EChatInstanceFlag.Lobby.value
            steam_type = EType.Chat.value
        elif char in CHAR_TO_TYPE:
            steam_type = CHAR_TO_TYPE[char].value
        else:
            logger.debug(t("logs.steam_id.unknown_type_char", char=char, value=match.group(0)))
            steam_type = EType.Invalid.value

        return cls(
            universe=int(universe),
            type=steam_type,
            instance=instance,
            account_id=_digits(account_id, match.string),
            format=SteamIDFormat.STEAM3,
        )

    @classmethod
    def from_steam64(cls, value: int) -> SteamID:
        """Unpack a 64-bit SteamID.

        Args:
            value: The packed identifier, 0 <= value < 2**64.

        Raises:
            FormatError: If value does not fit in an unsigned 64-bit integer.
        """
        if isinstance(value, bool) or not 0 <= value <= UINT64_MAX:
            raise FormatError(value)

        return cls(
            universe=value >> UNIVERSE_SHIFT,
            type=(value >> TYPE_SHIFT) & TYPE_MASK,
            instance=(value >> INSTANCE_SHIFT) & ACCOUNT_INSTANCE_MASK,
            account_id=value & ACCOUNT_ID_MASK,
            format=SteamIDFormat.STEAM64,
        )

    @classmethod
    def from_individual_account_id(cls, account_id: int | str) -> SteamID:
        """Create a public-universe individual ID with the desktop instance.

        Args:
            account_id: The account ID (e.g. a userdata folder name). Strings
                must be ASCII decimal digits with an optional sign, surrounding
                whitespace allowed; anything else yields account id 0.
        """
        parsed = 0
        if isinstance(account_id, int) and not isinstance(account_id, bool):
            parsed = account_id
        elif isinstance(account_id, str):
            match = _ACCOUNT_ID_RE.fullmatch(account_id)
            if match:
                try:
                    parsed = int(match.group(1))
                except ValueError:
                    parsed = 0

        return cls(
            universe=EUniverse.Public.value,
            type=EType.Individual.value,
            instance=EInstance.Desktop.value,
            account_id=parsed,
            format=SteamIDFormat.ACCOUNT_ID,
        )

    def replace(self, **changes: int) -> SteamID:
        """Return a copy with some of universe, type, instance, account_id changed.

        The copy's ``format`` is reset to SteamIDFormat.NONE since it no
        longer comes from the notation that was parsed.

        Raises:
            TypeError: If ``format`` is passed.
        """
        if "format" in changes:
            raise TypeError("SteamID.replace() resets format to NONE; it cannot be set")
        return dataclasses.replace(self, format=SteamIDFormat.NONE, **changes)

    # ----------------------------------------------------------------
    # Rendering
    # ----------------------------------------------------------------

    def to_steam2(self, newer_format: bool = False) -> str:
        """Render as Steam2 text, e.g. ``STEAM_0:0:23071901``.

        Args:
            newer_format: Write the public universe as 1 instead of the
                historical 0.

        Raises:
            UnsupportedRenderError: If the ID is not an individual account.
        """
        if self.type != EType.Individual:
            raise UnsupportedRenderError(self.type)

        universe = self.universe
        if not newer_format and universe == EUniverse.Public:
            universe = 0

        return f"STEAM_{universe}:{self.account_id & 1}:{self.account_id // 2}"

    def to_steam3(self) -> str:
        """Render as Steam3 text, e.g. ``[U:1:46143802]``."""
        if self.instance & EChatInstanceFlag.Clan:
            char = "c"
        elif self.instance & EChatInstanceFlag.Lobby:
            char = "L"
        else:
            char = TYPE_TO_CHAR.get(self.type, UNKNOWN_TYPE_CHAR)

        render_instance = self.type in (EType.AnonGameServer, EType.Multiseat) or (
            self.type == EType.Individual and self.instance != EInstance.Desktop
        )

        suffix = f":{self.instance}" if render_instance else ""
        return f"[{char}:{self.universe}:{self.account_id}{suffix}]"

    @property
    def as_64(self) -> int:
        """The packed unsigned 64-bit value.

        Fields wider than their slot are masked here, and a warning is logged.
        The Steam2 and Steam3 renderers and is_valid() look at the unmasked
        field, so an ID built from ``[U:1:99999999999]`` renders that
        account id in Steam3 but packs ``99999999999 & 0xFFFFFFFF``.
        """
        universe = _masked("universe", self.universe, UNIVERSE_MASK, 8)
        steam_type = _masked("type", self.type, TYPE_MASK, 4)
        instance = _masked("instance", self.instance, ACCOUNT_INSTANCE_MASK, 20)
        account_id = _masked("account_id", self.account_id, ACCOUNT_ID_MASK, 32)
        return (
            (universe << UNIVERSE_SHIFT)
            | (steam_type << TYPE_SHIFT)
            | (instance << INSTANCE_SHIFT)
            | account_id
        )

    def to_steam64(self) -> str:
        """Render as the decimal Steam64 string."""
        return str(self.as_64)

    def __int__(self) -> int:
        return self.as_64

    def __str__(self) -> str:
        return self.to_steam64()

    # ----------------------------------------------------------------
    # Validation & classification
    # ----------------------------------------------------------------

    def is_valid(self) -> bool:
        """Check the fields against the rules Steam applies to real IDs."""
        if self.type <= EType.Invalid or self.type > EType.AnonUser:
            return False

        if self.universe <= EUniverse.Invalid or self.universe > EUniverse.Dev:
            return False

        if self.type == EType.Individual and (self.account_id == 0 or self.instance > EInstance.Web):
            return False

        if self.type == EType.Clan and (self.account_id == 0 or self.instance != EInstance.All):
            return False

        if self.type == EType.GameServer and self.account_id == 0:
            return False

        return True

    def is_group_chat(self) -> bool:
        """True for the chat room attached to a Steam group."""
        return self.type == EType.Chat and bool(self.instance & EChatInstanceFlag.Clan)

    def is_lobby(self) -> bool:
        """True for lobby chat IDs (regular or matchmaking lobbies)."""
        return self.type == EType.Chat and bool(
            self.instance & (EChatInstanceFlag.Lobby | EChatInstanceFlag.MMSLobby)
        )

    # ----------------------------------------------------------------
    # Names
    # ----------------------------------------------------------------

    @property
    def universe_name(self) -> str | None:
        return _member_name(EUniverse, self.universe)

    @property
    def type_name(self) -> str | None:
        return _member_name(EType, self.type)

    @property
    def instance_name(self) -> str | None:
        return _member_name(EInstance, self.instance)
