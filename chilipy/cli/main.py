"""chili CLI - Main commands."""
import asyncio
import logging
import os
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="chili",
    help="ChRIS virtual filesystem CLI",
    add_completion=False
)
console = Console()


# Session path: $XDG_CONFIG_HOME/chili/session.session
def get_session_path() -> Path:
    config_base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    config_dir = Path(config_base) / "chili"
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir / "session"


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


def require_session() -> Path:
    session_path = get_session_path()
    if not session_path.with_suffix(".session").exists():
        console.print("[red]Not logged in. Run 'chili login' first.[/red]")
        raise typer.Exit(1)
    return session_path


@app.callback()
def main_options(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """ChRIS virtual filesystem CLI."""
    if verbose:
        from chilipy import setup_logging
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
        setup_logging(logging.DEBUG)


@app.command()
def login(
    url: str = typer.Option(None, "--url", "-a", help="ChRIS API root, e.g. https://cube.example.org/api/v1/"),
    username: str = typer.Option(None, "--username", "-u", help="ChRIS username"),
    password: str = typer.Option(None, "--password", "-p", help="ChRIS password"),
):
    """Login to ChRIS and save session."""
    from chilipy import ChrisClient, ChrisException
    
    if not url:
        url = typer.prompt("URL")
    if not username:
        username = typer.prompt("Username")
    if not password:
        password = typer.prompt("Password", hide_input=True)
    
    async def do_login():
        session_path = get_session_path()
        client = ChrisClient(str(session_path), url=url)
        
        try:
            await client.start()
            await client.login(username, password)
            console.print(f"[green]Logged in as {username}[/green]")
            console.print(f"Session saved to: {session_path}.session")
        except ChrisException as e:
            console.print(f"[red]Login failed: {e}[/red]")
            raise typer.Exit(1)
        finally:
            await client.close()
    
    run_async(do_login())


@app.command()
def logout():
    """Logout and delete session."""
    session_file = get_session_path().with_suffix(".session")
    if session_file.exists():
        session_file.unlink()
        console.print("[green]Logged out successfully[/green]")
    else:
        console.print("[yellow]No active session[/yellow]")


@app.command()
def whoami():
    """Show current logged in user."""
    from chilipy.core.session import SQLiteSession
    
    session_path = require_session()
    session = SQLiteSession(str(session_path))
    data = session.load()
    session.close()
    
    if data:
        console.print(f"User: {data.username}")
        console.print(f"URL: {data.url}")
        console.print(f"Session: {session_path.with_suffix('.session')}")
    else:
        console.print("[red]Session corrupted. Run 'chili login' again.[/red]")


@app.command()
def resolve(
    paths: List[str] = typer.Argument(..., help="Logical paths to resolve"),
    stats: bool = typer.Option(False, "--stats", "-s", help="Show path cache statistics"),
):
    """Resolve logical paths to their physical locations."""
    from chilipy import ChrisClient
    
    async def do_resolve() -> bool:
        failed = False
        async with ChrisClient(str(require_session())) as chris:
            table = Table()
            table.add_column("Logical", style="cyan")
            table.add_column("Physical")
            
            for path in paths:
                result = await chris.resolve(path)
                if result.ok:
                    table.add_row(path, result.value)
                else:
                    table.add_row(path, f"[red]{result.error}[/red]")
                    failed = True
            
            console.print(table)
            
            if stats:
                info = chris.cache_stats()
                summary = Table(title="Path cache")
                summary.add_column("Hits", justify="right")
                summary.add_column("Misses", justify="right")
                summary.add_column("Size", justify="right")
                summary.add_column("Hit rate", justify="right")
                summary.add_row(
                    str(info.hits),
                    str(info.misses),
                    str(info.size),
                    f"{info.hit_rate:.0%}"
                )
                console.print(summary)
        return failed
    
    if run_async(do_resolve()):
        raise typer.Exit(1)


@app.command()
def links(
    directory: str = typer.Argument("/", help="Logical directory to inspect"),
):
    """List the links stored in a directory."""
    from chilipy import ChrisClient, ChrisException
    
    async def do_links():
        async with ChrisClient(str(require_session())) as chris:
            try:
                records = await chris.list_links(directory)
            except ChrisException as e:
                console.print(f"[red]Cannot list links in {directory}: {e}[/red]")
                raise typer.Exit(1)
            
            if not records:
                console.print(f"[yellow]No links in {directory}[/yellow]")
                return
            
            table = Table()
            table.add_column("Name", style="cyan")
            table.add_column("Target")
            for record in records:
                table.add_row(str(record.get("name")), str(record.get("target")))
            console.print(table)
    
    run_async(do_links())


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
