"""Shopfront CLI application using Typer.

This module provides command-line utilities for the Shopfront backend:
secret generation, database initialization and housekeeping,
administrator creation and running the API server.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console
from sqlalchemy.ext.asyncio import async_sessionmaker

from shopfront.application.commands.user import CreateUserCommand
from shopfront.domain.shared.exceptions import DomainException
from shopfront.domain.user import UserRole
from shopfront.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
)
from shopfront.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from shopfront_auth import AuthError, PasswordHashingService
from shopfront_config.settings import get_settings

app = typer.Typer(
    name="shopfront",
    help="Shopfront - storefront and admin backend CLI",
    no_args_is_help=True,
)
console = Console()


secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)

admin_app = typer.Typer(
    name="admin",
    help="Administrator accounts",
    no_args_is_help=True,
)
app.add_typer(admin_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Shopfront configuration.

    Generates three secrets:
    - JWT_SECRET_KEY: Secret for signing access tokens
    - JWT_REFRESH_SECRET_KEY: Secret for signing refresh tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Shopfront Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]JWT_REFRESH_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={secrets.token_urlsafe(32)}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _init_db() -> None:
    engine = create_engine_from_settings()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def init_db() -> None:
    """Create all missing database tables (idempotent)."""
    asyncio.run(_init_db())
    console.print("[green]Database schema is up to date.[/green]")


async def _cleanup_tokens() -> int:
    engine = create_engine_from_settings()
    try:
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        async with session_maker() as session:
            repo = SQLAlchemyRepositoryFactory(session).refresh_token_repository()
            removed = await repo.cleanup_expired()
            await session.commit()
            return removed
    finally:
        await engine.dispose()


@db_app.command("cleanup-tokens")
def cleanup_tokens() -> None:
    """Delete expired refresh tokens. Safe to run from cron."""
    removed = asyncio.run(_cleanup_tokens())
    console.print(f"[green]Removed {removed} expired refresh token(s).[/green]")


async def _create_admin(email: str, name: str, password: str) -> str:
    engine = create_engine_from_settings()
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(engine, expire_on_commit=False)
        async with session_maker() as session:
            factory = SQLAlchemyRepositoryFactory(session)
            command = CreateUserCommand(
                user_repository=factory.user_repository(),
                credential_repository=factory.credential_repository(),
                cart_repository=factory.cart_repository(),
                password_service=PasswordHashingService(
                    rounds=get_settings().bcrypt_rounds,
                ),
            )
            try:
                user = await command.execute(
                    email=email,
                    name=name,
                    password=password,
                    role=UserRole.ADMIN,
                )
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            return str(user.id)
    finally:
        await engine.dispose()


@admin_app.command("create")
def create_admin(
    email: str = typer.Option(..., "--email", help="Administrator email"),
    name: str = typer.Option(..., "--name", help="Display name"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Create an ADMIN user. This is the only way to obtain the admin role."""
    try:
        user_id = asyncio.run(_create_admin(email, name, password))
    except (DomainException, AuthError) as e:
        console.print(f"[red]Could not create admin:[/red] {e}")
        raise typer.Exit(code=1) from e

    console.print(f"[green]Admin created:[/green] {email} ({user_id})")


@app.command("serve")
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the HTTP API with uvicorn on API_HOST:API_PORT."""
    settings = get_settings()
    console.print(
        f"[bold]Serving on[/bold] http://{settings.api_host}:{settings.api_port}",
    )
    uvicorn.run(
        "shopfront.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
