"""CLI entrypoint for task-ledger."""

from __future__ import annotations

import sys
from typing import TextIO

import rich_click as click

from task_ledger import __version__
from task_ledger.domain.enums import DisplayMode
from task_ledger.domain.errors import TaskError
from task_ledger.infra.logging import setup_logging
from task_ledger.infra.repository import TaskRepository
from task_ledger.services.task_service import TaskService

SEPARATOR = "-------------------------"


@click.command()
@click.version_option(version=__version__, prog_name="task-ledger")
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--mode",
    "modes",
    type=click.Choice([mode.value for mode in DisplayMode]),
    multiple=True,
    help="Display mode to print. Can be repeated; defaults to all four.",
)
def task_ledger(source: TextIO, modes: tuple[str, ...]) -> None:
    """Read `category,name,description[,deadline][,priority]` lines and print them sorted."""

    setup_logging()
    service = TaskService(TaskRepository())

    click.echo("Tasks reading")
    service.read_tasks(source, on_error=_report_error)

    selected = [DisplayMode(mode) for mode in modes] or list(DisplayMode)
    for mode in selected:
        click.echo(mode.banner)
        service.print_tasks(sys.stdout, mode.options)
        click.echo(SEPARATOR)


def _report_error(exc: TaskError) -> None:
    click.echo(str(exc))


def main() -> None:
    task_ledger()


if __name__ == "__main__":
    main()
