"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from bootstrap_scenario_engine.cli.commands.path import path
from bootstrap_scenario_engine.cli.commands.run import run
from bootstrap_scenario_engine.exceptions import (
    ConfigError,
    DataError,
    PathGenerationError,
)
from bootstrap_scenario_engine.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Bootstrap Scenario Engine CLI")


app.command()(run)
app.command()(path)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigError as exc:
        log.error(str(exc))
        sys.exit(1)
    except DataError as exc:
        log.error(f"Data validation failed: {exc}")
        sys.exit(2)
    except PathGenerationError as exc:
        log.error(f"Price path generation failed: {exc}")
        sys.exit(3)
    except KeyboardInterrupt:
        log.info("Shutdown requested.")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    main()
