from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from gohooks import logger
from gohooks.models import CheckResult
from gohooks.process import ProcessResult, run_process

ProcessRunner = Callable[..., ProcessResult]


def tool_path(path: str) -> str:
    """Keep a file name starting with "-" from being read as an option."""
    if path.startswith("-"):
        return f"./{path}"
    return path


class Checker(ABC):
    """One step of the code quality pipeline.

    Checkers never stop on the first bad file: every diagnostic of the
    step is collected into a single CheckResult.
    """

    label: str = ""

    def __init__(self, runner: ProcessRunner = run_process, cwd: Optional[str] = None):
        self.runner = runner
        self.cwd = cwd

    def run_tool(self, command: str, *args: str) -> ProcessResult:
        return self.runner(command, *args, cwd=self.cwd)

    def new_result(self) -> CheckResult:
        return CheckResult(label=self.label)

    @abstractmethod
    def run(self, paths: Sequence[str]) -> CheckResult:
        pass


class PerFileToolChecker(Checker):
    """Runs a tool once per file, any output counts as a diagnostic."""

    def __init__(self, tool: str, runner: ProcessRunner = run_process, cwd: Optional[str] = None):
        super().__init__(runner, cwd)
        self.tool = tool

    def tool_args(self, path: str) -> Sequence[str]:
        return [path]

    def run(self, paths: Sequence[str]) -> CheckResult:
        result = self.new_result()
        for path in paths:
            output = self.run_tool(self.tool, *self.tool_args(tool_path(path))).output
            if output:
                logger.debug(f"  {self.tool} {path}: {output}")
                result.diagnostics.append(output)
        if not result.passed:
            result.diagnostics.insert(0, "Affected files:")
        return result
