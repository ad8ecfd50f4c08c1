"""CLI entry point for sleep-monitor-server."""

import json
from pathlib import Path

import typer
import uvicorn
from pydantic import ValidationError

from sleep_monitor_server import __version__
from sleep_monitor_server.analytics import analyze
from sleep_monitor_server.core.config import settings
from sleep_monitor_server.core.logging import configure_logging
from sleep_monitor_server.schemas.samples import AudioMovementSample, VitalSample

app = typer.Typer(
    name="sleep-monitor-server",
    help="Sensor ingestion and sleep analytics server for a bedside sleep monitor",
    no_args_is_help=True,
)


@app.command()
def serve(
    host: str = typer.Option(None, help="Host to bind to (overrides config)"),
    port: int = typer.Option(None, help="Port to bind to (overrides config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload for development"),
) -> None:
    """Start the API server.

    Example:
        sleep-monitor-server serve
        sleep-monitor-server serve --host 0.0.0.0 --port 8080 --reload
    """
    uvicorn.run(
        "sleep_monitor_server.app:app",
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command(name="analyze")
def analyze_files(
    audio_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Audio/movement samples (JSON array)"
    ),
    vitals_file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, help="Vital-signs samples (JSON array)"
    ),
    chronological: bool = typer.Option(
        False, "--chronological", help="Files are oldest first instead of newest first"
    ),
    indent: int = typer.Option(2, help="JSON indentation"),
) -> None:
    """Run the analytics over two exported sample arrays and print the result.

    Each file holds a JSON array of stored records as returned by
    GET /api/sleepdata1 and /api/sleepdata2 (newest first).

    Example:
        sleep-monitor-server analyze audio.json vitals.json
    """
    try:
        audio = [
            AudioMovementSample.model_validate(item)
            for item in json.loads(audio_file.read_text())
        ]
        vitals = [
            VitalSample.model_validate(item) for item in json.loads(vitals_file.read_text())
        ]
    except (json.JSONDecodeError, TypeError, ValidationError) as e:
        typer.echo(f"Invalid sample file: {e}", err=True)
        raise typer.Exit(code=1) from e

    result = analyze(
        audio,
        vitals,
        thresholds=settings.analytics,
        newest_first=not chronological,
        display_timezone=settings.display_timezone,
    )
    typer.echo(result.model_dump_json(indent=indent))


@app.command()
def version() -> None:
    """Show version information."""
    typer.echo(f"sleep-monitor-server v{__version__}")


def main() -> None:
    """Main entry point."""
    configure_logging()
    app()


if __name__ == "__main__":
    main()
