import click

from gwt.cli.commands.add import add_cmd
from gwt.cli.commands.init import init_cmd
from gwt.cli.commands.list_cmd import list_cmd, ls_cmd
from gwt.cli.commands.remove import remove_cmd, rm_cmd
from gwt.cli.commands.switch import switch_cmd
from gwt.core.context import configure_logging, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gwt")
@click.option("--verbose", is_flag=True, help="Echo git commands and enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Manage a project of git worktrees, one directory per branch."""
    configure_logging(verbose)
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(verbose=verbose)


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(list_cmd)
cli.add_command(ls_cmd)
cli.add_command(remove_cmd)
cli.add_command(rm_cmd)
cli.add_command(switch_cmd)


def main() -> None:
    """CLI entry point used by the `gwt` console script."""
    cli()
