"""Command-line interface for pondo."""

import logging
import sys
from typing import Tuple

import click
from rich.markup import escape

from . import __version__
from .config import ConfigModel, load_config
from .errors import NotFound, PondoError, ValidationError
from .ids import make_id_generator
from .logging_setup import configure_logging
from .operations import TaskService
from .storage import InitStatus, TaskStore
from .task import Task
from .theme import get_console, glyph

logger = logging.getLogger(__name__)

COMMAND_ALIASES = {"ls": "list"}


class PondoGroup(click.Group):
    """Click group with command aliases and help for unknown commands."""

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        cmd_name = args[0] if args else None
        if cmd_name and not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            click.echo(ctx.get_help())
            ctx.exit(0)
        return super().resolve_command(ctx, args)


def build_service(config: ConfigModel) -> TaskService:
    """Wire the store and id generator for one invocation."""
    return TaskService(TaskStore(config), make_id_generator(config.id_strategy))


def report_error(config: ConfigModel, error: PondoError, action: str) -> None:
    """Print an operation failure to stderr."""
    if isinstance(error, (ValidationError, NotFound)):
        message = error.message
    else:
        message = f"Failed to {action}: {error.message}"
    get_console(config, stderr=True).print(
        f"[error]{escape(glyph(config, 'failure'))}{escape(message)}[/error]"
    )


def format_task_line(config: ConfigModel, task: Task) -> str:
    """Format one task for ``pondo list``."""
    if task.done:
        status = f"[todo_completed]{escape(glyph(config, 'completed', ''))}[/todo_completed]"
    else:
        status = f"[todo_pending]{escape(glyph(config, 'pending', ''))}[/todo_pending]"
    task_id = escape(f"[{task.id}]")
    return f"  {status} [task_id]{task_id}[/task_id] {escape(task.name)}"


@click.group(cls=PondoGroup, invoke_without_command=True)
@click.version_option(__version__, "-v", "--version", message="%(version)s",
                      help="Show version number")
@click.option("--verbose", is_flag=True, help="Verbose (debug) logging on stderr")
@click.pass_context
def main(ctx, verbose):
    """🦆 Personal task management CLI for developers."""
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['config'] = load_config()
    logger.debug("Using tasks file %s", ctx.obj['config'].tasks_file)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.pass_context
def init(ctx):
    """Initialize pondo in ~/.pondo"""
    config = ctx.obj['config']
    result = build_service(config).init()

    if not result.ok:
        report_error(config, result.error, "initialize")
        sys.exit(1)

    console = get_console(config)
    config_dir = escape(str(config.config_dir))
    if result.value is InitStatus.ALREADY_INITIALIZED:
        console.print(f"[warning]{escape(glyph(config, 'warning'))}pondo is already initialized in {config_dir}[/warning]")
    else:
        console.print(f"[success]{escape(glyph(config, 'success'))}Initialized pondo in {config_dir}[/success]")


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def add(ctx, words: Tuple[str, ...]):
    """Add a new task"""
    config = ctx.obj['config']
    result = build_service(config).add(" ".join(words))

    if not result.ok:
        report_error(config, result.error, "add task")
        return

    task = result.value
    get_console(config).print(
        f"[success]{escape(glyph(config, 'success'))}Added task: {escape(task.name)} (ID: {task.id})[/success]"
    )


@main.command(name="list")
@click.pass_context
def list_tasks(ctx):
    """List all tasks (alias: ls)"""
    config = ctx.obj['config']
    result = build_service(config).list_tasks()

    if not result.ok:
        report_error(config, result.error, "list tasks")
        return

    console = get_console(config)
    tasks = result.value
    if not tasks:
        console.print(f"[muted]{escape(glyph(config, 'empty'))}No tasks found. Use \"pondo add <task>\" to create one.[/muted]")
        return

    console.print()
    console.print(f"[header]{escape(glyph(config, 'list'))}Tasks:[/header]")
    for task in tasks:
        console.print(format_task_line(config, task))
    console.print()


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("args", nargs=-1, type=click.UNPROCESSED, metavar="ID")
@click.pass_context
def done(ctx, args: Tuple[str, ...]):
    """Mark task as done"""
    config = ctx.obj['config']
    # Only the first argument is the id; extra words are ignored.
    result = build_service(config).done(args[0] if args else "")

    if not result.ok:
        report_error(config, result.error, "mark task as done")
        return

    get_console(config).print(
        f"[success]{escape(glyph(config, 'success'))}Marked task as done: {escape(result.value.name)}[/success]"
    )


if __name__ == "__main__":
    main()
