# SPDX-License-Identifier: Apache-2.0
"""deletionguard CLI package."""

from __future__ import annotations

import typer

from .check import check
from .listeners import listeners

app = typer.Typer(
    add_completion=False,
    help="Inspect deletion listeners and check whether metadata objects can be deleted.",
)

app.command(name="listeners")(listeners)
app.command(name="check")(check)

__all__ = ["app"]
