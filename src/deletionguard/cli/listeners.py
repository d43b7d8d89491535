# SPDX-License-Identifier: Apache-2.0
"""List the deletion listeners registered at bootstrap."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from .utils import load_cli_settings


def listeners(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file (defaults to $DELETIONGUARD_CONFIG)"
    ),
):
    """Show the deletion listeners guarding each object type, in dispatch order.

    Examples:
        deletionguard listeners
        deletionguard listeners --config deletionguard.yaml
    """
    settings = load_cli_settings(config)

    from deletionguard.bootstrap import bootstrap, get_deletion_registry

    bootstrap(settings=settings)
    registry = get_deletion_registry()

    types = registry.registered_types()
    if not types:
        print("📭 No deletion listeners registered")
        return

    table = Table(title="Deletion listeners")
    table.add_column("Object type", no_wrap=True)
    table.add_column("Order", justify="right")
    table.add_column("Listener")
    for object_type in types:
        for order, listener in enumerate(registry.listeners_for(object_type), start=1):
            table.add_row(object_type.value, str(order), listener.name)

    Console().print(table)
    print(f"\nTotal: {registry.listener_count()} listener(s) across {len(types)} type(s)")
    if registry.frozen:
        print("🔒 Registry is frozen")
