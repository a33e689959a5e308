# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from . import clean

app = typer.Typer(
    name="cleanrebuild",
    help="Empty bin/obj folders across a solution and optionally rebuild it.",
    no_args_is_help=True,
    add_completion=False,
)
clean.register(app)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main"]
