"""CLI commands for inspecting provincial official records."""

from __future__ import annotations

import asyncio
from typing import Annotated

import typer

officials_app = typer.Typer()


@officials_app.command("list")
def list_cmd(
    position: Annotated[str | None, typer.Option("--position", help="Exact position to filter by")] = None,
    search: Annotated[str | None, typer.Option("--search", help="Substring of the name (case-insensitive)")] = None,
) -> None:
    """List provincial officials, optionally filtered."""
    asyncio.run(_list_impl(position, search))


async def _list_impl(position: str | None, search: str | None) -> None:
    """Async implementation of the list command."""
    from provincial_admin.core.config import get_settings
    from provincial_admin.core.database import dispose_engine, get_session_factory, init_engine
    from provincial_admin.services.provincial_official_service import list_officials

    settings = get_settings()
    init_engine(settings.database_url, echo=False, schema=settings.database_schema)

    try:
        factory = get_session_factory()
        async with factory() as session:
            officials = await list_officials(session, position=position, search=search)

        if not officials:
            typer.echo("No provincial officials found.")
            return
        for official in officials:
            image = official.profile_image or "-"
            typer.echo(f"{official.id}  {official.position:<32}  {official.name}  [{image}]")
        typer.echo(f"\n{len(officials)} official(s)")
    finally:
        await dispose_engine()


@officials_app.command("positions")
def positions_cmd() -> None:
    """Print the fixed list of provincial positions."""
    from provincial_admin.models.provincial_official import OFFICIAL_POSITIONS

    for label in OFFICIAL_POSITIONS:
        typer.echo(label)
