# Go formatting Checks

from typing import Sequence

from gohooks.checkers.base import Checker, ProcessRunner, tool_path
from gohooks.models import CheckResult
from gohooks.process import run_process

GO_FORMAT_LABEL = "Executing formatting and simplifications check on all .go files ..."


class GoFormatChecker(Checker):
    """Lists files "gofmt -s" would rewrite and tells how to fix them."""

    label = GO_FORMAT_LABEL

    def __init__(self, gofmt: str = "gofmt", runner: ProcessRunner = run_process, cwd=None):
        super().__init__(runner, cwd)
        self.gofmt = gofmt

    def run(self, paths: Sequence[str]) -> CheckResult:
        result = self.new_result()
        unformatted = []
        tool_paths = [tool_path(path) for path in paths]
        for path in tool_paths:
            output = self.run_tool(self.gofmt, "-s", "-l", path).output
            if output:
                unformatted.extend(output.splitlines())

        if unformatted:
            result.diagnostics.append("Affected files:")
            result.diagnostics.extend(unformatted)
            result.diagnostics.append("To fix formatting run:")
            result.diagnostics.extend(f"{self.gofmt} -s -w {path}" for path in tool_paths if path in unformatted)
        return result
