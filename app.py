#!/usr/bin/env python3
"""
Command-line entry point for the maimai chart generator
Prompts: chart directory -> API key, then streams maidata.txt with a progress indicator
"""

import sys

from rich.console import Console

from config import settings
from pipeline import ChartPipeline, SessionStatus
from utils.validators import setup_logging

STYLES = {
    SessionStatus.SUCCESS: "bold green",
    SessionStatus.CANCELLED: "cyan",
    SessionStatus.FAILED: "bold red",
    SessionStatus.ERROR: "bold red",
}


def main() -> int:
    setup_logging(
        log_file=settings.log_file,
        level=settings.log_level,
        console=settings.log_to_console,
    )

    console = Console()
    outcome = ChartPipeline(config=settings, console=console).run()

    console.print(outcome.message, style=STYLES[outcome.status], markup=False)
    return outcome.exit_code


if __name__ == "__main__":
    sys.exit(main())
