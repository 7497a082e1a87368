#!/usr/bin/env python3

# Utility functions for git
#
# Derived in a very large part from the gnome git hooks, themselves
# apparently adapted form git-bz.
#
# Original copyright header:
#
# | Copyright (C) 2008  Owen Taylor
# | Copyright (C) 2009  Red Hat, Inc
# |
# | This program is free software; you can redistribute it and/or
# | modify it under the terms of the GNU General Public License
# | as published by the Free Software Foundation; either version 2
# | of the License, or (at your option) any later version.
# |
# | This program is distributed in the hope that it will be useful,
# | but WITHOUT ANY WARRANTY; without even the implied warranty of
# | MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# | GNU General Public License for more details.
# |
# | You should have received a copy of the GNU General Public License
# | along with this program; if not, If not, see
# | http://www.gnu.org/licenses/.
# |
# | (These are adapted from git-bz)

import os
import subprocess
from typing import List

from gohooks import logger
from gohooks.utils import GoHooksGitError, GoHooksToolNotFoundError

# Exit code git uses for fatal errors (bad revision, not a repository, ...)
GIT_FATAL_EXIT_CODE = 128


def git_run(command, *args, **kwargs):
    """Run a git command.

    PARAMETERS
        Non-keyword arguments are passed verbatim as command line arguments
        Keyword arguments are turned into command line options
            <name>=True => --<name>
            <name>='<str>' => --<name>=<str>
        Special keyword arguments:
            _git=<str>: git executable to run, "git" by default.
            _cwd=<str>: Run the git command from the given directory.
            _input=<str>: Feed <str> to stdin of the command
            _raw: Return the output untouched (no stripping)

    Only stdout is returned. On a non-zero exit code, CalledProcessError
    is raised carrying both stdout and stderr.
    """
    to_run = [kwargs.pop('_git', 'git')]
    to_add_to_run = []
    cwd = None
    input = None
    raw = False
    for (k, v) in list(kwargs.items()):
        if k == '_cwd':
            cwd = v
        elif k == '_input':
            input = v
        elif k == '_raw':
            raw = True
        elif v is True:
            if len(k) == 1:
                to_add_to_run.append("-" + k)
            else:
                to_add_to_run.append("--" + k.replace("_", "-"))
        else:
            to_add_to_run.append("--" + k.replace("_", "-") + "=" + v)

    to_run.append(command.replace("_", "-"))
    to_run.extend(to_add_to_run)
    to_run.extend(args)

    logger.debug(f"  $ {' '.join(to_run)}")

    stdin = None if input is None else subprocess.PIPE
    try:
        process = subprocess.Popen(to_run, stdout=subprocess.PIPE, stderr=subprocess.PIPE, stdin=stdin, cwd=cwd)
    except FileNotFoundError:
        if cwd and not os.path.isdir(cwd):
            raise GoHooksGitError(f"Path [{cwd}] does not exist.")
        raise GoHooksToolNotFoundError(to_run[0])
    output, error = process.communicate(None if input is None else input.encode("utf-8"))

    # undecodable file names come out with replacement characters, the ASCII check rejects them
    output = output.decode("utf-8", errors="replace")
    error = error.decode("utf-8", errors="replace")
    if process.returncode != 0:
        raise subprocess.CalledProcessError(process.returncode, " ".join(to_run), output, error)

    if raw:
        return output
    return output.strip()


class Git:
    """Wrapper to allow us to do git.<command>(...) instead of git_run()

    Every command runs with the git executable and working directory the
    wrapper was created with.
    """

    def __init__(self, git_path="git", cwd=""):
        self.git_path = git_path
        self.cwd = cwd

    def __getattr__(self, command):
        def f(*args, **kwargs):
            if '_cwd' not in kwargs and self.cwd:
                kwargs['_cwd'] = self.cwd
            kwargs.setdefault('_git', self.git_path)
            return git_run(command, *args, **kwargs)
        return f


def empty_tree_rev(git: Git) -> str:
    """Return the empty tree's SHA1.

    This is a SHA1 one can use as the parent of a commit that
    does not have a parent (root commit). Nothing is written to
    the object database.
    """
    return git.hash_object('-t', 'tree', '--stdin', _input='')


def has_head(git: Git) -> bool:
    """Return True if the repository has at least one commit."""
    try:
        git.rev_parse('HEAD', verify=True, quiet=True)
        return True
    except subprocess.CalledProcessError:
        return False


def resolve_tree(git: Git) -> str:
    """Return the reference staged changes are compared against.

    RETURN VALUE
        "HEAD" when a commit exists, the empty tree SHA1 on a fresh
        repository so that a diff against "nothing" works the same way.
    """
    if has_head(git):
        tree = 'HEAD'
    else:
        try:
            tree = empty_tree_rev(git)
        except subprocess.CalledProcessError as ex:
            raise GoHooksGitError(f"Cannot compute the empty tree: {ex.stderr.strip()}")
    logger.debug(f"Tree: {tree}")
    return tree


def get_top_level(git: Git) -> str:
    try:
        return git.rev_parse(show_toplevel=True)
    except subprocess.CalledProcessError as ex:
        raise GoHooksGitError(f"Path [{git.cwd or os.curdir}] is not git repo: {ex.stderr.strip()}")


def get_hooks_dir(git: Git) -> str:
    """Return the absolute path of the directory git looks for hooks in.

    Honours core.hooksPath and worktrees, unlike a plain .git/hooks.
    """
    try:
        hooks_dir = git.rev_parse('--git-path', 'hooks')
    except subprocess.CalledProcessError as ex:
        raise GoHooksGitError(f"Cannot locate hooks directory: {ex.stderr.strip()}")
    if not os.path.isabs(hooks_dir):
        hooks_dir = os.path.join(git.cwd or os.curdir, hooks_dir)
    return os.path.abspath(hooks_dir)


def staged_files(git: Git, tree: str) -> List[str]:
    """Return paths added or modified in the index against the given tree.

    Deleted paths are excluded. The NUL separated output keeps paths
    with spaces or newlines intact.
    """
    try:
        output = git.diff(tree, cached=True, name_only=True, z=True, diff_filter='d', _raw=True)
    except subprocess.CalledProcessError as ex:
        raise GoHooksGitError(f"Cannot list staged files: {ex.stderr.strip()}")
    return [path for path in output.split('\0') if path]


def whitespace_errors(git: Git, tree: str) -> str:
    """Return git's own report of whitespace problems in the index.

    REMARK
        "git diff-index --check" exits with a non-zero code when it
        found something, so only a fatal exit code is an error.
    """
    try:
        return git.diff_index(tree, cached=True, check=True, diff_filter='d')
    except subprocess.CalledProcessError as ex:
        if ex.returncode == GIT_FATAL_EXIT_CODE:
            raise GoHooksGitError(f"Cannot check whitespaces: {ex.stderr.strip()}")
        return ex.output.strip()


def commit_message(git: Git, tree: str) -> str:
    """Return the full message (subject and body) of the given commit."""
    try:
        return git.log(tree, format='%B', max_count='1', _raw=True).rstrip('\n')
    except subprocess.CalledProcessError as ex:
        raise GoHooksGitError(f"Cannot read commit message of [{tree}]: {ex.stderr.strip()}")
