# Go syntax Checks

from typing import Sequence

from gohooks import logger
from gohooks.checkers.base import Checker, ProcessRunner, tool_path
from gohooks.models import CheckResult
from gohooks.process import run_process

GO_SYNTAX_LABEL = "Executing valid syntax check on all .go files ..."


class GoSyntaxChecker(Checker):
    """Parses every file with "gofmt -e", the formatted source is thrown away."""

    label = GO_SYNTAX_LABEL

    def __init__(self, gofmt: str = "gofmt", runner: ProcessRunner = run_process, cwd=None):
        super().__init__(runner, cwd)
        self.gofmt = gofmt

    def run(self, paths: Sequence[str]) -> CheckResult:
        result = self.new_result()
        for path in paths:
            process = self.run_tool(self.gofmt, "-e", tool_path(path))
            errors = process.stderr.strip()
            if process.returncode != 0 and not errors:
                errors = f"{path}: {self.gofmt} exited with code {process.returncode}"
            if errors:
                logger.debug(f"  syntax errors in {path}")
                result.diagnostics.append(errors)
        if not result.passed:
            result.diagnostics.insert(0, "Affected files:")
        return result
