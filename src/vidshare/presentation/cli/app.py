"""VidShare CLI application using Typer.

Command-line utilities for operating the backend: schema creation,
bootstrapping the first admin account and secret generation.
"""

import asyncio
import secrets

import typer
from pydantic import ValidationError
from rich.console import Console

from vidshare.application.commands.users import CreateUserCommand
from vidshare.domain.user import UserAlreadyExistsError, UserRole
from vidshare.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)
from vidshare.presentation.api.dependencies import (
    create_tables,
    get_engine,
    get_session_maker,
)
from vidshare.presentation.api.schemas.users import UserCreateRequest
from vidshare_auth import PasswordHashingService, WeakPasswordError

app = typer.Typer(
    name="vidshare",
    help="VidShare - video sharing backend CLI",
    no_args_is_help=True,
)
console = Console()

db_app = typer.Typer(name="db", help="Database utilities", no_args_is_help=True)
users_app = typer.Typer(name="users", help="User management", no_args_is_help=True)
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(db_app)
app.add_typer(users_app)
app.add_typer(secrets_app)


@db_app.command("init")
def init_database() -> None:
    """Create missing database tables. Existing data is never touched."""

    async def _run() -> None:
        try:
            await create_tables()
        finally:
            await get_engine().dispose()

    asyncio.run(_run())
    console.print("[green]Database schema is up to date.[/green]")


async def _create_admin(username: str, email: str, password: str) -> None:
    try:
        async with get_session_maker()() as session:
            command = CreateUserCommand(
                UserRepositorySQLAlchemy(session),
                PasswordHashingService(),
            )
            await command.execute(
                username=username,
                email=email,
                password=password,
                role=UserRole.ADMIN,
            )
            await session.commit()
    finally:
        await get_engine().dispose()


@users_app.command("create-admin")
def create_admin(
    username: str = typer.Argument(..., help="Login name of the admin"),
    email: str = typer.Argument(..., help="E-mail address of the admin"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        help="Password (prompted when omitted)",
    ),
) -> None:
    """Create an administrator account."""
    try:
        request = UserCreateRequest(username=username, email=email, password=password)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            console.print(f"[red]{field}: {error['msg']}[/red]")
        raise typer.Exit(1) from e

    try:
        asyncio.run(_create_admin(request.username, request.email, request.password))
    except UserAlreadyExistsError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e
    except WeakPasswordError as e:
        console.print(f"[red]{e.message}[/red]")
        raise typer.Exit(1) from e

    console.print(f"[green]Admin [bold]{username}[/bold] created.[/green]")


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for VidShare configuration.

    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]VidShare Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes for HS256
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={secrets.token_urlsafe(64)}")
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


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
