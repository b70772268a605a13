from .errors import TourError, UsageError, DemoAbort
from .options import Action, OptionSpec, InvocationRequest, OPTIONS, parse_options
from .runner import DemoRunner
from .cli import CommandLineInterface, main
