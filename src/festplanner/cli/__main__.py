#!/usr/bin/env python3
"""
CLI entry point for festplanner.cli module.

This allows running: python -m festplanner.cli
"""

from .main import cli

if __name__ == "__main__":
    cli()
