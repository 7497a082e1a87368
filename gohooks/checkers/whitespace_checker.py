# Trailing whitespaces Checks

from typing import Sequence

from gohooks.checkers.base import Checker
from gohooks.git import Git, whitespace_errors
from gohooks.models import CheckResult

WHITESPACE_LABEL = "Executing no trailing whitespaces check on all files ..."


class WhitespaceChecker(Checker):
    """Delegates to "git diff-index --check", which looks at the whole index
    against the tree, so the paths only matter for being non-empty.
    """

    label = WHITESPACE_LABEL

    def __init__(self, git: Git, tree: str):
        super().__init__(cwd=git.cwd or None)
        self.git = git
        self.tree = tree

    def run(self, paths: Sequence[str]) -> CheckResult:
        result = self.new_result()
        report = whitespace_errors(self.git, self.tree)
        if report:
            result.diagnostics.append("Affected files:")
            result.diagnostics.extend(report.splitlines())
        return result
