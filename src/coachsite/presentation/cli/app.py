"""Coachsite CLI application using Typer.

This module provides command-line utilities for the Coachsite backend:
secret generation for deployment configuration, seeding the first
administrator and running the API server.
"""

import asyncio
import secrets

import typer
from rich.console import Console
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from coachsite.application.commands.users import CreateUserCommand
from coachsite.infrastructure.persistence.sqlalchemy import create_tables
from coachsite_config.settings import get_settings
from coachsite_identity import (
    EmailAlreadyExistsError,
    PasswordHashingService,
    UserRole,
    WeakPasswordError,
)
from coachsite_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

app = typer.Typer(
    name="coachsite",
    help="Coachsite - coaching institute website backend CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Coachsite configuration.

    Generates two required secrets:
    - JWT_SECRET_KEY: Secret for signing session tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Coachsite Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes is plenty for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print("[dim]Copy the above values to your config/.env file.[/dim]\n")


async def seed_admin_user(
    database_url: str,
    email: str,
    password: str,
    name: str,
) -> bool:
    """Create a verified administrator unless the email is already taken.

    Returns
    -------
    True if a user was created, False if the email already existed.
    """
    engine = create_async_engine(database_url)
    try:
        await create_tables(engine)
        session_maker = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        async with session_maker() as session:
            command = CreateUserCommand(
                UserRepositorySQLAlchemy(session),
                PasswordHashingService(),
            )
            try:
                await command.execute(
                    name=name,
                    email=email,
                    password=password,
                    role=UserRole.ADMIN,
                )
            except EmailAlreadyExistsError:
                await session.rollback()
                return False
            await session.commit()
            return True
    finally:
        await engine.dispose()


@app.command("seed-admin")
def seed_admin(
    email: str = typer.Option(..., envvar="SEED_ADMIN_EMAIL", help="Admin email"),
    password: str = typer.Option(
        ...,
        envvar="SEED_ADMIN_PASSWORD",
        help="Admin password",
        prompt=True,
        hide_input=True,
    ),
    name: str = typer.Option("Administrator", envvar="SEED_ADMIN_NAME"),
) -> None:
    """Create the first administrator account (no-op if it exists)."""
    settings = get_settings()

    try:
        created = asyncio.run(
            seed_admin_user(settings.database_url, email, password, name),
        )
    except (WeakPasswordError, ValueError) as e:
        console.print(f"[red]Could not create admin:[/red] {e}")
        raise typer.Exit(code=1) from e

    if created:
        console.print(f"[green]Admin created:[/green] {email}")
    else:
        console.print(f"[yellow]User already exists:[/yellow] {email}")


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default from settings)"),
    port: int | None = typer.Option(None, help="Port (default from settings)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the API server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "coachsite.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
