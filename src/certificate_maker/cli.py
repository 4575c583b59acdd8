from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
import uvicorn

from certificate_maker.app.core.logging import setup_logging
from certificate_maker.app.settings import get_app_settings
from certificate_maker.certificates.service import bootstrap_store
from certificate_maker.db.settings import get_mongo_settings
from certificate_maker.db.store import MongoStore

app = typer.Typer(no_args_is_help=True, add_completion=False)
logger = logging.getLogger("certificate_maker.cli")


@app.command("serve")
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address; defaults to HOST or 0.0.0.0"),
    port: Optional[int] = typer.Option(None, help="Listen port; defaults to PORT or 8080"),
    reload: bool = typer.Option(False, help="Auto-reload on code changes (development only)"),
):
    """Run the HTTP API under uvicorn."""
    setup_logging()
    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port
    logger.info("Server starting on %s:%s", host, port)
    uvicorn.run(
        "certificate_maker.api.fastapi:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )


@app.command("seed")
def seed(
    mongo_url: Optional[str] = typer.Option(None, help="Override MONGO_URL"),
    database: Optional[str] = typer.Option(None, help="Override MONGO_DATABASE"),
):
    """Ping MongoDB, ensure the name index, and insert the default certificate if empty."""
    setup_logging()
    settings = get_mongo_settings(url=mongo_url, database=database)

    async def _run():
        store = MongoStore(settings)
        try:
            return await bootstrap_store(store)
        finally:
            await store.close()

    seeded = asyncio.run(_run())
    if seeded is None:
        typer.echo("Collection already populated; nothing to seed.")
    else:
        typer.echo(f"Inserted default certificate {seeded.id}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
