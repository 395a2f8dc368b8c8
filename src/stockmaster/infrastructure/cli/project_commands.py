"""CLI commands for projects."""

from __future__ import annotations

from pathlib import Path

import click

from stockmaster.application.commands import (
    CreateProject,
    DeleteProject,
    RenameProject,
    SelectProject,
)
from stockmaster.domain.exceptions import StockMasterError
from stockmaster.infrastructure.bootstrap import controller


@click.command("create")
@click.option("--name", default="", help="Project name (defaults to 'New Project').")
def project_create(name: str) -> None:
    """Create a project and make it active."""
    ctl = controller()
    try:
        state = ctl.dispatch(CreateProject(name=name))
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    project = state.active_project
    click.echo(f"Project '{project.name}' created  (id={project.id})")


@click.command("list")
def project_list() -> None:
    """List all projects with their totals."""
    summaries = controller().project_summaries()

    if not summaries:
        click.echo("No projects found.")
        return

    click.echo(f"  {'ID':<32} {'Name':<20} {'Items':>6} {'Value':>14} {'Alerts':>7} {'Low':>5}")
    click.echo(f"  {'-'*89}")
    for s in summaries:
        marker = "*" if s.is_active else " "
        click.echo(
            f"{marker} {s.id:<32} {s.name:<20} {s.item_count:>6} "
            f"{s.inventory_value:>14} {s.out_of_stock:>7} {s.low_stock:>5}"
        )


@click.command("select")
@click.option("--id", "project_id", required=True, help="Project ID to activate.")
def project_select(project_id: str) -> None:
    """Switch the active project."""
    ctl = controller()
    if ctl.state.find_project(project_id) is None:
        raise click.ClickException(f"Project '{project_id}' not found")
    try:
        ctl.dispatch(SelectProject(project_id))
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project '{project_id}' is now active.")


@click.command("rename")
@click.option("--id", "project_id", required=True, help="Project ID.")
@click.option("--name", required=True, help="New project name.")
def project_rename(project_id: str, name: str) -> None:
    """Rename a project."""
    try:
        controller().dispatch(RenameProject(project_id, name))
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project '{project_id}' renamed to '{name}'")


@click.command("delete")
@click.option("--id", "project_id", required=True, help="Project ID.")
@click.confirmation_option(prompt="Delete this project with all its products and history?")
def project_delete(project_id: str) -> None:
    """Delete a project, its products and its history."""
    try:
        controller().dispatch(DeleteProject(project_id))
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Project '{project_id}' deleted.")


@click.command("export")
@click.option("--id", "project_id", required=True, help="Project ID to export.")
@click.option(
    "--out-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the export file into.",
)
def project_export(project_id: str, out_dir: Path) -> None:
    """Export a project to a standalone JSON file."""
    export = controller().export_project(project_id)
    if export is None:
        raise click.ClickException(f"Project '{project_id}' not found")

    target = export.write_to(out_dir)
    click.echo(f"Exported to {target}")


@click.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def project_import(file: Path) -> None:
    """Import a project from an exported JSON file."""
    try:
        contents = file.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        raise click.ClickException(f"Invalid file format: {file} is not UTF-8 text")

    ctl = controller()
    try:
        state = ctl.import_project(contents)
    except StockMasterError as exc:
        raise click.ClickException(str(exc))

    project = state.projects[-1]
    click.echo(f"Project '{project.name}' imported  (id={project.id})")
