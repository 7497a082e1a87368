from typing import List, Sequence, Tuple

from gohooks import logger
from gohooks.checkers.ascii_filename_checker import AsciiFilenameChecker
from gohooks.checkers.base import Checker, ProcessRunner
from gohooks.checkers.go_format_checker import GoFormatChecker
from gohooks.checkers.go_lint_checker import GoLintChecker
from gohooks.checkers.go_syntax_checker import GoSyntaxChecker
from gohooks.checkers.go_vet_checker import GoVetChecker
from gohooks.checkers.shell_lint_checker import ShellLintChecker
from gohooks.checkers.whitespace_checker import WhitespaceChecker
from gohooks.config import HooksConfig
from gohooks.git import Git, staged_files
from gohooks.models import CheckResult, StagedFiles
from gohooks.process import run_process
from gohooks.report import Reporter
from gohooks.utils import GoHooksToolNotFoundError

PipelineStep = Tuple[Checker, Sequence[str]]


def get_staged_files(git: Git, tree: str, config: HooksConfig) -> StagedFiles:
    return StagedFiles(
        paths=tuple(staged_files(git, tree)),
        go_extension=config.go_extension,
        shell_extension=config.shell_extension,
    )


def build_pipeline(git: Git, tree: str, files: StagedFiles, config: HooksConfig,
                   runner: ProcessRunner = run_process) -> List[PipelineStep]:
    """Return the checkers to run, in order, with the files each one gets.

    Go and shell steps are only present when such files are staged.
    """
    cwd = git.cwd or None
    tools = config.tools
    steps: List[PipelineStep] = [
        (WhitespaceChecker(git, tree), files.paths),
        (AsciiFilenameChecker(runner, cwd), files.paths),
    ]

    go_files = files.go_files
    if go_files:
        steps += [
            (GoSyntaxChecker(tools.gofmt, runner, cwd), go_files),
            (GoFormatChecker(tools.gofmt, runner, cwd), go_files),
            (GoVetChecker(tools.go, runner, cwd), go_files),
            (GoLintChecker(tools.golint, runner, cwd), go_files),
        ]

    shell_files = files.shell_files
    if shell_files:
        steps.append((ShellLintChecker(tools.shellcheck, config.shellcheck_format, runner, cwd), shell_files))

    return steps


def run_step(checker: Checker, paths: Sequence[str]) -> CheckResult:
    try:
        return checker.run(paths)
    except GoHooksToolNotFoundError as ex:
        result = checker.new_result()
        result.diagnostics.append(str(ex))
        return result


def run_pipeline(steps: Sequence[PipelineStep], reporter: Reporter) -> List[CheckResult]:
    """Run the steps until one fails. Returns the results of the steps that ran."""
    results = []
    for checker, paths in steps:
        reporter.start(checker.label)
        result = run_step(checker, paths)
        reporter.finish(result)
        results.append(result)
        if not result.passed:
            logger.debug(f"Stopped at: {checker.label}")
            break
    return results


def check_code_quality(git: Git, tree: str, config: HooksConfig, reporter: Reporter,
                       runner: ProcessRunner = run_process) -> int:
    files = get_staged_files(git, tree, config)
    if not files:
        logger.debug("Nothing staged, nothing to check.")
        return 0

    reporter.files(files.paths)
    results = run_pipeline(build_pipeline(git, tree, files, config, runner), reporter)
    return 0 if all(result.passed for result in results) else 1
