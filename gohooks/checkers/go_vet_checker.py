# Go vet Checks

import posixpath
from typing import List, Sequence

from gohooks import logger
from gohooks.checkers.base import Checker, ProcessRunner
from gohooks.models import CheckResult
from gohooks.process import run_process

GO_VET_LABEL = "Executing vet check on all .go files ..."


def get_package_dirs(paths: Sequence[str]) -> List[str]:
    """Return the unique directories of the given files, first seen first.

    Directories get a "./" prefix so go treats them as file system
    paths rather than import paths.
    """
    dirs = []
    for path in paths:
        directory = posixpath.dirname(path)
        dirs.append(f"./{directory}" if directory else ".")
    return list(dict.fromkeys(dirs))


class GoVetChecker(Checker):
    """Vets each package once, vet works on packages not single files.

    A package fails when "go vet" exits non-zero, the diagnostics it
    printed are reported as they are.
    """

    label = GO_VET_LABEL

    def __init__(self, go: str = "go", runner: ProcessRunner = run_process, cwd=None):
        super().__init__(runner, cwd)
        self.go = go

    def run(self, paths: Sequence[str]) -> CheckResult:
        result = self.new_result()
        for directory in get_package_dirs(paths):
            process = self.run_tool(self.go, "vet", directory)
            if process.returncode == 0:
                continue
            logger.debug(f"  vet failed for {directory}")
            result.diagnostics.append(process.output or f"{directory}: {self.go} vet exited with code {process.returncode}")
        if not result.passed:
            result.diagnostics.insert(0, "Affected files:")
        return result
