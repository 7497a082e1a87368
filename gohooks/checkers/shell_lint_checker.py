# Shell scripts lint Checks

from typing import Sequence

from gohooks.checkers.base import PerFileToolChecker, ProcessRunner
from gohooks.process import run_process

SHELL_LINT_LABEL = "Executing linter check on all .sh files ..."


class ShellLintChecker(PerFileToolChecker):
    """Runs shellcheck with a one-line-per-issue output format."""

    label = SHELL_LINT_LABEL

    def __init__(self, shellcheck: str = "shellcheck", output_format: str = "gcc",
                 runner: ProcessRunner = run_process, cwd=None):
        super().__init__(shellcheck, runner, cwd)
        self.output_format = output_format

    def tool_args(self, path: str) -> Sequence[str]:
        return ["--format", self.output_format, path]
