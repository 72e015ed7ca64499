"""Application entry point: parse, report, exit."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import NoReturn, TextIO

from .constants import DEFAULT_COMMAND_NAME, DIAG_REJECTED, EXIT_FAILURE, EXIT_SUCCESS
from .errors import Abort, OptionRejected
from .logging_utils import setup_logging
from .options import CommandSpec, OptionSpec, command
from .parser import GenericFailure, ParseResult, Success, parse
from .usage import render_diagnostic, render_usage

logger = logging.getLogger(__name__)

RunHook = Callable[[Success], int | None]


def _default_name() -> str:
    argv0 = sys.argv[0] if sys.argv else ""
    return Path(argv0).name or DEFAULT_COMMAND_NAME


class App:
    """A command-line application declared as an ordered list of options.

    ``run`` is called with the successful parse once every token has been
    consumed; its return value is the exit status (None means success).
    Any parse failure is written to stderr with the usage block and turned
    into a nonzero status instead.
    """

    def __init__(
        self,
        name: str | None = None,
        options: Sequence[OptionSpec] = (),
        *,
        run: RunHook,
        stderr: TextIO | None = None,
        log_file: str | Path | None = None,
    ) -> None:
        self.spec: CommandSpec = command(name if name is not None else _default_name(), options)
        self._run = run
        self._stderr = stderr
        self.log_file = log_file

    @property
    def name(self) -> str:
        return self.spec.name

    @property
    def options(self) -> tuple[OptionSpec, ...]:
        return self.spec.options

    def usage(self) -> str:
        return render_usage(self.spec)

    def parse(self, args: Sequence[str]) -> ParseResult:
        return parse(self.spec, args)

    def fail(self) -> NoReturn:
        """Abort the current invocation with a generic failure."""
        raise Abort()

    def invoke(self, args: Sequence[str]) -> int:
        logger.info("%s: invoked with %d argument(s)", self.name, len(args))
        result = self.parse(args)
        if not isinstance(result, Success):
            logger.info("%s: parse failed: %s", self.name, type(result).__name__)
            self._report(render_diagnostic(self.spec, result))
            return EXIT_FAILURE

        try:
            status = self._run(result)
        except Abort:
            logger.info("%s: run aborted", self.name)
            self._report(render_diagnostic(self.spec, GenericFailure()))
            return EXIT_FAILURE
        except OptionRejected as exc:
            logger.info("%s: run rejected its arguments: %s", self.name, exc.reason)
            self._report(DIAG_REJECTED.format(name=self.name, reason=exc.reason) + "\n" + self.usage())
            return EXIT_FAILURE

        exit_code = EXIT_SUCCESS if status is None else int(status)
        logger.info("%s: finished with status %d", self.name, exit_code)
        return exit_code

    def main(self, argv: Sequence[str] | None = None) -> NoReturn:
        # invoke() is the only error boundary.
        if self.log_file:
            setup_logging(self.log_file)
        args = list(argv) if argv is not None else sys.argv[1:]
        sys.exit(self.invoke(args))

    def _report(self, text: str) -> None:
        stream = self._stderr if self._stderr is not None else sys.stderr
        print(text, file=stream)
