# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import click
from click import HelpFormatter
from click_help_colors import HelpColorsCommand, HelpColorsGroup


class GNUHelpFormatter(HelpFormatter):
    """Help formatter printing each option on its own line, GNU-style."""

    def __init__(self, width=None, headers_color=None, options_color=None):
        super().__init__(width=width)
        self.headers_color = headers_color or "white"
        self.options_color = options_color or "white"

    def write_heading(self, heading):
        styled_heading = click.style(heading, fg=self.headers_color, bold=True)
        self.write(f"{styled_heading}\n")

    def write_usage(self, prog_name, args="", prefix=None):
        styled_prefix = click.style(prefix or "Usage:", fg=self.headers_color, bold=True)
        usage_line = f"{styled_prefix} {prog_name}"
        if args:
            usage_line += f" {args}"

        self.write(f"{usage_line}\n")

    def write_dl(self, rows, col_max=30, col_spacing=2):
        for term, definition in rows:
            self.write(f"  {click.style(term, fg=self.options_color, bold=True)}\n")

            for line in (definition or "").splitlines():
                if line.strip():
                    self.write(f"      {line}\n")
            self.write("\n")


def _format_gnu_help(command: click.Command, ctx: click.Context) -> str:
    formatter = GNUHelpFormatter(
        width=ctx.terminal_width,
        headers_color=getattr(command, "help_headers_color", None),
        options_color=getattr(command, "help_options_color", None),
    )
    command.format_help(ctx, formatter)
    return formatter.getvalue()


class GNUHelpColorsCommand(HelpColorsCommand):
    """Colored command printing its options in GNU-style."""

    def get_help(self, ctx):
        return _format_gnu_help(self, ctx)


class GNUHelpColorsGroup(HelpColorsGroup):
    """Colored command group printing its options and commands in GNU-style."""

    def get_help(self, ctx):
        return _format_gnu_help(self, ctx)
