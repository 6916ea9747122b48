"""Answerfile - embed provisioning scripts into Windows answer files.

Reconciles the ``Extensions`` section of an autounattend template against a
CSV table of script origins and destinations.
"""

__version__ = "0.1.0"

# Configure logging for library use
import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Re-export main CLI entry point
from .cli import main

__all__ = ["main"]
