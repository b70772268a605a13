import sys

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich import box

from .errors import DemoAbort, UsageError
from .options import OPTIONS, Action, parse_options
from .runner import DemoRunner

VERSION_TEXT = "x.y.z"
EXIT_OK = 0
EXIT_USAGE = 1
EXIT_ABORT = 101


class CommandLineInterface:
    def __init__(self, runner=None, console=None, error_console=None):
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.runner = runner
        self.palette = {
            'primary': 'cyan',
            'success': 'green',
            'danger': 'red',
            'muted': 'bright_black'
        }
        self.actions = {
            Action.HELP: self._help,
            Action.VERSION: self._version,
            Action.RUN: self._run
        }

    def execute(self, args, program=""):
        try:
            request = parse_options(args, program)
        except UsageError as e:
            hint = f"Try '{program} --help' for more information." if program else "Try '--help' for more information."
            self._print_error(f"error: {e.message}", soft_wrap=True, markup=False)
            self._print_error(self._styled_feedback(hint, success=False, title="Error"))
            return EXIT_USAGE
        try:
            return self.actions[request.action](request)
        except DemoAbort as e:
            self._print_error(f"aborted: {e.step} failed: {e.reason}", soft_wrap=True, markup=False)
            self._print_error(self._styled_feedback("The demo sequence stopped before completing.", success=False, title="Aborted"))
            return EXIT_ABORT

    def _help(self, request):
        self._print(f"Help: {request.program} [options]", markup=False, soft_wrap=True)
        grid = Table.grid(padding=(0, 4))
        grid.add_column(justify="left")
        grid.add_column(justify="left")
        for spec in OPTIONS:
            grid.add_row(f"-{spec.short}, --{spec.long}", escape(spec.description))
        self._print("")
        self._print("Options:")
        self._print(grid)
        return EXIT_OK

    def _version(self, request):
        self._print(VERSION_TEXT, markup=False, soft_wrap=True)
        return EXIT_OK

    def _run(self, request):
        runner = self.runner or DemoRunner(console=self.console)
        runner.run()
        return EXIT_OK

    def _styled_feedback(self, message, success=True, title=None):
        style = self.palette['success'] if success else self.palette['danger']
        panel_title = title or ("Done" if success else "Error")
        return Panel(
            Text(message, overflow="fold"),
            title=panel_title,
            border_style=style,
            box=box.ROUNDED
        )

    def _print(self, message, **kwargs):
        self.console.print(message, **kwargs)

    def _print_error(self, message, **kwargs):
        self.error_console.print(message, **kwargs)


def main(argv=None, program=None):
    if argv is None:
        argv = sys.argv[1:]
    if program is None:
        program = sys.argv[0] if sys.argv else ""
    cli = CommandLineInterface()
    return cli.execute(argv, program)


def console_main():
    sys.exit(main())
