"""
Logging setup for command-line runs.

On GitHub Actions, warnings and errors are written as workflow commands
(`::warning::...`) so they show up as annotations on the run summary.
"""
from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "webarchive"


class GitHubActionsFormatter(logging.Formatter):
    COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def __init__(self):
        super().__init__("%(message)s")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        # Workflow commands are line-oriented; escape per the Actions toolkit
        escaped = message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")
        return f"::{command}::{escaped}"


def configure_logging(verbose: bool = False, github_actions: bool = False) -> logging.Logger:
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    # Replace rather than stack handlers when called more than once
    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    if github_actions:
        handler.setFormatter(GitHubActionsFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        ))
    logger.addHandler(handler)
    return logger
