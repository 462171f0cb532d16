#!/usr/bin/env python3
"""
Storefront management commands.

Usage:
    uv run python manage.py serve [--reload] [--host HOST] [--port PORT]
    uv run python manage.py migrate [--status | --dry-run]
    uv run python manage.py seed [--keep]

Configuration:
    ``migrate`` connects straight to PostgreSQL through DATABASE_URL.
    ``seed`` goes through the Supabase API (SUPABASE_URL and
    SUPABASE_SERVICE_ROLE_KEY), like the running server.
"""

import argparse
import hashlib
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from shared.config import Settings, get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
MIGRATIONS_TABLE = "_migrations"

SEED_PRODUCTS = [
    {
        "title": "Latest-generation notebook",
        "description": "A powerful notebook for work and play",
        "price": 4500.00,
        "imageUrl": "/images/notebook.png",
        "isFeatured": True,
    },
    {
        "title": "Advanced smartphone",
        "description": "Capture your best moments with a high-resolution camera",
        "price": 2800.00,
        "imageUrl": "/images/smartphone.png",
        "isFeatured": False,
    },
    {
        "title": "RGB mechanical keyboard",
        "description": "High performance and tactile feedback for gamers and programmers",
        "price": 350.50,
        "imageUrl": "/images/teclado.png",
        "isFeatured": True,
    },
    {
        "title": "RGB gaming monitor",
        "description": "High performance and the ideal resolution for gaming",
        "price": 1350.50,
        "imageUrl": "/images/monitor.png",
        "isFeatured": True,
    },
]


# -------------------------------------------------------------------------
# serve
# -------------------------------------------------------------------------


def serve(args: argparse.Namespace, settings: Settings) -> None:
    import uvicorn

    uvicorn.run(
        "api:app",
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
        log_level="debug" if settings.debug else settings.log_level.lower(),
    )


# -------------------------------------------------------------------------
# migrate
# -------------------------------------------------------------------------


def checksum_of(content: str) -> str:
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def get_db_connection(settings: Settings):
    """Open a PostgreSQL connection or exit with a readable message."""
    import psycopg2

    if not settings.database_url:
        console.print("[red]Error:[/red] DATABASE_URL is not set.")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.database_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(f"""
            CREATE TABLE IF NOT EXISTS {MIGRATIONS_TABLE} (
                id SERIAL PRIMARY KEY,
                name VARCHAR(255) NOT NULL UNIQUE,
                checksum VARCHAR(64) NOT NULL,
                applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
            );
        """)
    conn.commit()


def get_applied_migrations(conn) -> dict[str, dict]:
    with conn.cursor() as cur:
        cur.execute(f"SELECT name, checksum, applied_at FROM {MIGRATIONS_TABLE} ORDER BY name;")
        return {row[0]: {"checksum": row[1], "applied_at": row[2]} for row in cur.fetchall()}


def find_pending(
    applied: dict[str, dict],
    migrations_dir: Path = MIGRATIONS_DIR,
) -> list[tuple[str, Path, str]]:
    """
    List SQL files not yet applied, in name order.

    A file whose checksum changed after it was applied is reported, not
    re-run.
    """
    pending = []
    for sql_file in sorted(migrations_dir.glob("*.sql")):
        checksum = checksum_of(sql_file.read_text())
        if sql_file.name not in applied:
            pending.append((sql_file.name, sql_file, checksum))
        elif applied[sql_file.name]["checksum"] != checksum:
            console.print(f"[yellow]Warning:[/yellow] {sql_file.name} changed since it was applied")
    return pending


def apply_migration(conn, name: str, sql_file: Path, checksum: str) -> None:
    import psycopg2
    from psycopg2 import sql

    console.print(f"[blue]Running:[/blue] {name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(sql_file.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (name, checksum),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {name} applied")


def show_status(applied: dict[str, dict], pending: list[tuple[str, Path, str]]) -> None:
    if not applied and not pending:
        console.print("[dim]No migrations found.[/dim]")
        return

    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")
    table.add_column("Checksum")
    for name, info in applied.items():
        applied_at = info["applied_at"].strftime("%Y-%m-%d %H:%M:%S") if info["applied_at"] else ""
        table.add_row(name, "[green]Applied[/green]", applied_at, info["checksum"])
    for name, _, checksum in pending:
        table.add_row(name, "[yellow]Pending[/yellow]", "", checksum)
    console.print(table)


def migrate(args: argparse.Namespace, settings: Settings) -> None:
    conn = get_db_connection(settings)
    try:
        ensure_migrations_table(conn)
        applied = get_applied_migrations(conn)
        pending = find_pending(applied)

        if args.status:
            show_status(applied, pending)
            return
        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        for name, sql_file, checksum in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {name}")
            else:
                apply_migration(conn, name, sql_file, checksum)
    finally:
        conn.close()


# -------------------------------------------------------------------------
# seed
# -------------------------------------------------------------------------


def seed_catalog(repository, keep: bool = False) -> tuple[int, list]:
    """
    Load the sample products.

    Args:
        repository: A ProductRepository (or anything with the same methods).
        keep: Leave existing products in place instead of clearing them.

    Returns:
        (number of products removed, products created)
    """
    from modules.products.models import ProductCreate

    removed = 0 if keep else repository.delete_all()
    created = [
        repository.create(ProductCreate.model_validate(item).to_record())
        for item in SEED_PRODUCTS
    ]
    return removed, created


def seed(args: argparse.Namespace, settings: Settings) -> None:
    from modules.products.repository import ProductRepository
    from shared.database import get_supabase_client

    console.print("Seeding the product catalog...")
    repository = ProductRepository(get_supabase_client(settings))
    removed, created = seed_catalog(repository, keep=args.keep)
    if removed:
        console.print(f"[dim]Removed {removed} existing product(s)[/dim]")
    console.print(f"[green]{len(created)} product(s) created.[/green]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Storefront management commands")
    commands = parser.add_subparsers(dest="command", required=True)

    serve_parser = commands.add_parser("serve", help="Run the API server")
    serve_parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    serve_parser.add_argument("--host", type=str, help="Host to bind to")
    serve_parser.add_argument("--port", type=int, help="Port to bind to")
    serve_parser.set_defaults(handler=serve)

    migrate_parser = commands.add_parser("migrate", help="Apply pending SQL migrations")
    mode = migrate_parser.add_mutually_exclusive_group()
    mode.add_argument("--status", action="store_true", help="Show migration status only")
    mode.add_argument("--dry-run", action="store_true", help="List what would run")
    migrate_parser.set_defaults(handler=migrate)

    seed_parser = commands.add_parser("seed", help="Load sample products")
    seed_parser.add_argument(
        "--keep", action="store_true", help="Keep existing products instead of clearing them"
    )
    seed_parser.set_defaults(handler=seed)

    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    args.handler(args, get_settings())


if __name__ == "__main__":
    main()
