# Go lint Checks

from gohooks.checkers.base import PerFileToolChecker, ProcessRunner
from gohooks.process import run_process

GO_LINT_LABEL = "Executing linter check on all .go files ..."


class GoLintChecker(PerFileToolChecker):

    label = GO_LINT_LABEL

    def __init__(self, golint: str = "golint", runner: ProcessRunner = run_process, cwd=None):
        super().__init__(golint, runner, cwd)
