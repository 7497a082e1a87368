#!/usr/bin/env python3

import argparse
import sys

from gohooks import logger, set_verbose
from gohooks.code_quality import check_code_quality
from gohooks.commit_message import strip_comments, validate_commit_message
from gohooks.config import HooksConfig, find_config
from gohooks.git import Git, commit_message, get_top_level, resolve_tree
from gohooks.report import Reporter
from gohooks.utils import GoHooksError, GoHooksUsageError

COMMIT_MESSAGE_TASK = "commit_message"
CODE_QUALITY_TASK = "code_quality"
TASKS = (COMMIT_MESSAGE_TASK, CODE_QUALITY_TASK)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Commit message and code quality checks for Go repositories")

    parser.add_argument("-v", "--verbose", default=False, dest="verbose", action="store_true", help="Show debug output")
    parser.add_argument("-C", "--repo", default=".", dest="repo", help="Repository path")
    parser.add_argument("--config", default=None, dest="config", help="Config yaml-file")
    parser.add_argument("--message-file", default=None, dest="message_file",
                        help="Check the pending message in this file instead of the last commit (commit-msg hook)")
    parser.add_argument("task", default="", nargs="?", help=f"One of: {', '.join(TASKS)}")

    return parser.parse_args(argv)


def read_message_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8") as message_file:
            return strip_comments(message_file.read())
    except (OSError, UnicodeDecodeError) as ex:
        raise GoHooksError(f"Cannot read commit message file [{path}]: {ex}")


def check_task(task: str):
    if task not in TASKS:
        raise GoHooksUsageError(f"Unknown task: `{task}`")


def run_commit_message(git: Git, tree: str, config: HooksConfig, reporter: Reporter, message_file=None) -> int:
    message = read_message_file(message_file) if message_file else commit_message(git, tree)
    result = validate_commit_message(message, config)
    reporter.start(result.label)
    reporter.finish(result)
    return 0 if result.passed else 1


def run_task(task: str, git: Git, config: HooksConfig, reporter: Reporter, message_file=None) -> int:
    check_task(task)
    tree = resolve_tree(git)
    if task == COMMIT_MESSAGE_TASK:
        return run_commit_message(git, tree, config, reporter, message_file)
    return check_code_quality(git, tree, config, reporter)


def main(argv=None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)

    try:
        check_task(args.task)
        repo_root = get_top_level(Git(cwd=args.repo))
        config = find_config(args.config, repo_root)
        # staged paths are relative to the top level, tools must run there
        git = Git(git_path=config.tools.git, cwd=repo_root)
        reporter = Reporter(label_width=config.label_width)
        return run_task(args.task, git, config, reporter, args.message_file)
    except GoHooksError as ex:
        logger.error(str(ex))
        return 1


if __name__ == "__main__":
    sys.exit(main())
