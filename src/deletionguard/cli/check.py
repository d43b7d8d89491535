# SPDX-License-Identifier: Apache-2.0
"""Check whether an object in a catalog can be deleted."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from deletionguard.domain.exceptions import ObjectNotFoundError
from deletionguard.domain.value_objects import DeletableType

from .utils import load_cli_settings


def check(
    object_type: str = typer.Argument(..., help="Object type, e.g. relationship_type"),
    uid: str = typer.Argument(..., help="Uid of the object to check"),
    catalog: Path = typer.Option(..., "--catalog", help="YAML catalog of metadata objects"),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML settings file (defaults to $DELETIONGUARD_CONFIG)"
    ),
):
    """Run a deletion request through every listener without deleting anything.

    Exits with 0 when the deletion is allowed, 1 when it is vetoed and 2 when
    the input is invalid.

    Examples:
        deletionguard check relationship_type Rt0000000A1 --catalog catalog.yaml
    """
    settings = load_cli_settings(config)

    try:
        parsed_type = DeletableType.parse(object_type)
    except ValueError as e:
        print(f"❌ {e}")
        raise typer.Exit(2)

    from deletionguard.bootstrap import bootstrap, get_deletion_service
    from deletionguard.infrastructure.repositories.catalog_loader import load_catalog

    try:
        store = load_catalog(catalog)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ Catalog error: {e}")
        raise typer.Exit(2)

    bootstrap(settings=settings, catalog=store)
    service = get_deletion_service()

    try:
        obj = service.get_object(parsed_type, uid)
    except (ObjectNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        raise typer.Exit(2)

    decision = service.can_delete(obj)
    if decision.vetoed:
        print(f"VETOED: {decision.veto.reason}")
        print(f"   Vetoed by: {decision.vetoed_by}")
        raise typer.Exit(1)

    print(f"ALLOWED: {parsed_type.display_name} {obj.uid} ({obj.name}) can be deleted")
    print(f"   Listeners consulted: {decision.listeners_run}")
