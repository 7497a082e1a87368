#!/usr/bin/env python3

import argparse
import os
import stat
import sys

from gohooks import logger, set_verbose
from gohooks.git import Git, get_hooks_dir
from gohooks.utils import GoHooksError

HOOK_TEMPLATE = """#!/bin/sh
# Installed by gohooks-install
exec gohooks {task}
"""

HOOKS = {
    "pre-commit": "code_quality",
    "post-commit": "commit_message",
}


def check_hook(hook_path: str, content: str, force: bool = False):
    if force or not os.path.exists(hook_path):
        return
    with open(hook_path, "r", encoding="utf-8") as hook_file:
        current = hook_file.read()
    if current != content:
        raise GoHooksError(f"Hook [{hook_path}] already exists. Use --force to overwrite it.")


def write_hook(hook_path: str, content: str) -> str:
    with open(hook_path, "w", encoding="utf-8") as hook_file:
        hook_file.write(content)
    mode = os.stat(hook_path).st_mode
    os.chmod(hook_path, mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return hook_path


def install_hooks(git: Git, force: bool = False):
    hooks_dir = get_hooks_dir(git)
    os.makedirs(hooks_dir, exist_ok=True)

    hooks = [(hook_name, os.path.join(hooks_dir, hook_name), HOOK_TEMPLATE.format(task=task))
             for hook_name, task in HOOKS.items()]
    # nothing is written unless every hook can be
    for _, hook_path, content in hooks:
        check_hook(hook_path, content, force)

    installed = []
    for hook_name, hook_path, content in hooks:
        write_hook(hook_path, content)
        logger.info(f"Installed {hook_name} hook: {hook_path}")
        installed.append(hook_path)
    return installed


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Install gohooks as git pre-commit and post-commit hooks")
    parser.add_argument("-r", "--repo", default=".", dest="repo", help="Repository path")
    parser.add_argument("-f", "--force", default=False, dest="force", action="store_true",
                        help="Overwrite existing hooks")
    parser.add_argument("-v", "--verbose", default=False, dest="verbose", action="store_true", help="Show debug output")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    set_verbose(args.verbose)

    try:
        install_hooks(Git(cwd=args.repo), args.force)
    except GoHooksError as ex:
        logger.error(str(ex))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
