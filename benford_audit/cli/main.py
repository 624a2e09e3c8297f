"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import sys

import typer

from benford_audit.cli.commands.analyze import analyze
from benford_audit.cli.commands.score import score
from benford_audit.exceptions import ConfigValidationError, DataSourceError, ReportWriteError
from benford_audit.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Benford's Law conformity audit CLI")


app.command()(analyze)
app.command()(score)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli")
    try:
        app()
    except ConfigValidationError as exc:
        log.error(str(exc))
        raise SystemExit(1)
    except DataSourceError as exc:
        log.error(f"Data source error: {exc}")
        raise SystemExit(2)
    except ReportWriteError as exc:
        log.error(f"Report could not be written: {exc}")
        raise SystemExit(4)
    except KeyboardInterrupt:
        log.info("Shutdown requested")
        raise SystemExit(130)
    except Exception:
        log.exception("Unhandled exception")
        raise SystemExit(255)


if __name__ == "__main__":
    sys.exit(main())
