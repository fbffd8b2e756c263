#!/usr/bin/env python3
"""steamid-codec - command line entry point.

Converts every id given on the command line between the Steam2, Steam3 and
Steam64 notations.
"""

from __future__ import annotations

import logging
from typing import Annotated

import typer

from steamid_codec.config import config
from steamid_codec.core.logging import logger, setup_logging
from steamid_codec.core.steam_id import SteamID
from steamid_codec.utils.i18n import init_i18n, t
from steamid_codec.utils.steamid_constants import SteamIDError, UnsupportedRenderError

__all__ = ["app", "describe", "main"]

app = typer.Typer(
    name="steamid-codec",
    help="Convert SteamIDs between the Steam2, Steam3 and Steam64 notations",
    add_completion=False,
)


def describe(steam_id: SteamID, newer_format: bool = False) -> list[str]:
    """Render one SteamID as the lines printed by the CLI.

    Args:
        steam_id: The parsed id.
        newer_format: Write the public universe as STEAM_1 in the Steam2 line.

    Returns:
        Output lines, without trailing newlines.
    """
    try:
        steam2 = steam_id.to_steam2(newer_format)
    except UnsupportedRenderError:
        steam2 = t("cli.not_available")

    unknown = t("cli.not_available")
    return [
        t("cli.steam2", value=steam2),
        t("cli.steam3", value=steam_id.to_steam3()),
        t("cli.steam64", value=steam_id.to_steam64()),
        t("cli.universe", value=steam_id.universe_name or f"{unknown} ({steam_id.universe})"),
        t("cli.type", value=steam_id.type_name or f"{unknown} ({steam_id.type})"),
        t("cli.instance", value=steam_id.instance_name or steam_id.instance),
        t("cli.account_id", value=steam_id.account_id),
        t("cli.valid", value=t("cli.yes") if steam_id.is_valid() else t("cli.no")),
    ]


@app.command()
def convert(
    ids: Annotated[
        list[str],
        typer.Argument(
            help="SteamIDs in Steam2, Steam3 or Steam64 notation",
            show_default=False,
        ),
    ],
    newer_format: Annotated[
        bool,
        typer.Option(
            "--newer-format",
            help="Write the public universe as STEAM_1 instead of STEAM_0",
        ),
    ] = False,
    lang: Annotated[
        str | None,
        typer.Option(
            "--lang",
            help="Message locale, e.g. en or de (default: STEAMID_UI_LANGUAGE)",
        ),
    ] = None,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Log at DEBUG level",
        ),
    ] = False,
) -> None:
    """
    Print every notation, the field names and the validity of each id.

    Exits 1 if any id could not be parsed.
    """
    # 1. Initialize language before any message is rendered
    init_i18n(lang or config.UI_LANGUAGE)

    # 2. Setup logging
    setup_logging(logging.DEBUG if debug else config.LOG_LEVEL, config.LOG_FILE)
    logger.debug(t("logs.main.started", locale=lang or config.UI_LANGUAGE))

    newer_format = newer_format or config.STEAM2_NEWER_FORMAT

    exit_code = 0
    for index, raw in enumerate(ids):
        if index:
            typer.echo()
        try:
            steam_id = SteamID.parse(raw)
        except SteamIDError as e:
            logger.debug(t("logs.main.parse_failed", value=raw, error=e))
            typer.echo(t("cli.error", error=e))
            exit_code = 1
            continue

        typer.echo(t("cli.input", value=raw, format=steam_id.format.value))
        for line in describe(steam_id, newer_format):
            typer.echo(line)

    if exit_code:
        raise typer.Exit(exit_code)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
