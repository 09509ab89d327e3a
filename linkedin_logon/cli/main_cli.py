# linkedin_logon/cli/main_cli.py
import json
import typer

from ..utils import generate_fernet_key

app = typer.Typer(
    name="linkedin-logon",
    help="LinkedIn Logon Command Line Interface.",
    no_args_is_help=True
)


@app.command("generate-key")
def generate_key():
    """Print a new Fernet key for LINKEDIN_LOGON_STATE_COOKIE_KEY."""
    typer.echo(generate_fernet_key())


@app.command("show-config")
def show_config():
    """Show the effective settings, with secrets masked."""
    from ..settings import Settings

    current = Settings()
    typer.echo(json.dumps(current.masked(), indent=2, default=str))
    if not current.linkedin_app_id or not current.linkedin_app_secret:
        typer.secho(
            "CLI: Warning - LINKEDIN_LOGON_LINKEDIN_APP_ID or _APP_SECRET is not set.",
            fg=typer.colors.YELLOW
        )
        raise typer.Exit(code=1)
    if not current.state_cookie_key:
        typer.secho(
            "CLI: Warning - LINKEDIN_LOGON_STATE_COOKIE_KEY is not set, an ephemeral key will be used.",
            fg=typer.colors.YELLOW
        )


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
):
    """Run the logon service with uvicorn."""
    import uvicorn

    uvicorn.run("linkedin_logon.main:app", host=host, port=port, reload=reload)


def cli_entry_point():
    """Entry point function for console script registration in pyproject.toml"""
    app()


if __name__ == "__main__":
    cli_entry_point()
