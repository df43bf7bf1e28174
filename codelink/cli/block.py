"""Block Typer app factory."""

import typer

from codelink.api.block.cmd_check import cmd_check
from codelink.api.block.cmd_info import cmd_info
from codelink.api.block.cmd_show import cmd_show
from codelink.cli._handle_stage_result import _handle_stage_result


def block() -> typer.Typer:
    """Create and configure the block Typer app."""
    app = typer.Typer(
        name="block",
        help="Inspect code-link blocks in markdown documents",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="check")
    def check_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown file to check"),
        root: str | None = typer.Option(None, help="Directory linked files resolve against"),
        config: str | None = typer.Option(None, "--config", help="Configuration file"),
    ) -> None:
        """Report code-link blocks and their diagnostics."""
        _handle_stage_result(cmd_check, ctx)(path=path, root=root, config_path=config)

    @app.command(name="show")
    def show_cmd(
        ctx: typer.Context,
        path: str = typer.Argument(..., help="Markdown file to read"),
        index: int | None = typer.Option(None, "--index", "-i", help="Zero-based block index"),
        root: str | None = typer.Option(None, help="Directory linked files resolve against"),
        config: str | None = typer.Option(None, "--config", help="Configuration file"),
    ) -> None:
        """Show the resolved content of code-link blocks."""
        _handle_stage_result(cmd_show, ctx)(path=path, index=index, root=root, config_path=config)

    @app.command(name="info")
    def info_cmd(
        ctx: typer.Context,
        info: str = typer.Argument(..., help="Info string, e.g. 'csharp ./Program.cs --region Main'"),
        keyword: str | None = typer.Option(None, help="Keyword naming code-link blocks"),
    ) -> None:
        """Parse a single info string."""
        _handle_stage_result(cmd_info, ctx)(info=info, keyword=keyword)

    return app
