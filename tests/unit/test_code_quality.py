"""Unit tests for the code quality pipeline."""

import io
from unittest.mock import patch

import pytest

from gohooks.checkers.go_format_checker import GO_FORMAT_LABEL
from gohooks.checkers.go_lint_checker import GO_LINT_LABEL
from gohooks.checkers.go_syntax_checker import GO_SYNTAX_LABEL
from gohooks.checkers.go_vet_checker import GO_VET_LABEL
from gohooks.checkers.shell_lint_checker import SHELL_LINT_LABEL
from gohooks.checkers.whitespace_checker import WHITESPACE_LABEL
from gohooks.checkers.ascii_filename_checker import ASCII_FILENAME_LABEL
from gohooks.code_quality import check_code_quality
from gohooks.config import HooksConfig
from gohooks.git import Git
from gohooks.process import ProcessResult
from gohooks.report import Reporter
from gohooks.utils import GoHooksToolNotFoundError


class TestCheckCodeQuality:
    """Test cases for check_code_quality."""

    @pytest.fixture(autouse=True)
    def git_queries(self):
        with patch("gohooks.code_quality.staged_files") as mock_staged, \
                patch("gohooks.checkers.whitespace_checker.whitespace_errors") as mock_whitespace:
            mock_staged.return_value = []
            mock_whitespace.return_value = ""
            self.mock_staged = mock_staged
            self.mock_whitespace = mock_whitespace
            yield

    def setup_method(self):
        self.stream = io.StringIO()
        self.reporter = Reporter(self.stream)
        self.config = HooksConfig()
        self.git = Git()

    def check(self, runner):
        return check_code_quality(self.git, "HEAD", self.config, self.reporter, runner)

    def test_nothing_staged_runs_nothing(self, make_runner):
        runner = make_runner()
        assert self.check(runner) == 0
        assert runner.calls == []
        self.mock_whitespace.assert_not_called()
        assert self.stream.getvalue() == ""

    def test_all_checks_pass(self, make_runner):
        self.mock_staged.return_value = ["main.go", "cmd/tool.go", "scripts/build.sh", "README.md"]
        runner = make_runner()

        assert self.check(runner) == 0

        output = self.stream.getvalue()
        assert output.startswith("Files which will be examined:\nmain.go\ncmd/tool.go\nscripts/build.sh\nREADME.md\n\n")
        for label in (WHITESPACE_LABEL, ASCII_FILENAME_LABEL, GO_SYNTAX_LABEL, GO_FORMAT_LABEL,
                      GO_VET_LABEL, GO_LINT_LABEL, SHELL_LINT_LABEL):
            assert label.ljust(70) + "OK\n" in output
        assert runner.calls == [
            ("gofmt", "-e", "main.go"),
            ("gofmt", "-e", "cmd/tool.go"),
            ("gofmt", "-s", "-l", "main.go"),
            ("gofmt", "-s", "-l", "cmd/tool.go"),
            ("go", "vet", "."),
            ("go", "vet", "./cmd"),
            ("golint", "main.go"),
            ("golint", "cmd/tool.go"),
            ("shellcheck", "--format", "gcc", "scripts/build.sh"),
        ]

    def test_whitespace_failure_stops_pipeline(self, make_runner):
        self.mock_staged.return_value = ["main.go"]
        self.mock_whitespace.return_value = "main.go:2: trailing whitespace."
        runner = make_runner()

        assert self.check(runner) == 1

        output = self.stream.getvalue()
        assert WHITESPACE_LABEL.ljust(70) + "ERROR\nAffected files:\nmain.go:2: trailing whitespace.\n" in output
        assert ASCII_FILENAME_LABEL not in output
        assert runner.calls == []

    def test_non_ascii_names_stop_before_go_checks(self, make_runner):
        self.mock_staged.return_value = ["naïve.go", "ok.go", "über.sh"]
        runner = make_runner()

        assert self.check(runner) == 1

        output = self.stream.getvalue()
        assert "ERROR\nAffected files:\nnaïve.go\nüber.sh\n" in output
        assert runner.calls == []

    def test_syntax_error_stops_before_format_vet_lint(self, make_runner):
        self.mock_staged.return_value = ["main.go"]
        runner = make_runner({
            ("gofmt", "-e", "main.go"): ProcessResult(
                command="gofmt", stderr="main.go:5:1: expected '}', found 'EOF'\n", returncode=2),
        })

        assert self.check(runner) == 1

        output = self.stream.getvalue()
        assert GO_SYNTAX_LABEL.ljust(70) + "ERROR\n" in output
        assert GO_FORMAT_LABEL not in output
        assert runner.calls == [("gofmt", "-e", "main.go")]

    def test_same_directory_vetted_once(self, make_runner):
        self.mock_staged.return_value = ["pkg/a.go", "pkg/b.go"]
        runner = make_runner()

        assert self.check(runner) == 0
        assert [call for call in runner.calls if call[0] == "go"] == [("go", "vet", "./pkg")]

    def test_shell_only_skips_go_checks(self, make_runner):
        self.mock_staged.return_value = ["build.sh"]
        runner = make_runner()

        assert self.check(runner) == 0
        assert runner.calls == [("shellcheck", "--format", "gcc", "build.sh")]
        assert GO_SYNTAX_LABEL not in self.stream.getvalue()

    def test_missing_tool_fails_step(self, make_runner):
        self.mock_staged.return_value = ["main.go"]
        runner = make_runner({("golint", "main.go"): GoHooksToolNotFoundError("golint")})

        assert self.check(runner) == 1
        assert GO_LINT_LABEL.ljust(70) + "ERROR\ngolint: command not found\n" in self.stream.getvalue()

    def test_configured_tools_and_extensions(self, make_runner):
        self.config = HooksConfig(shell_extension=".bash", tools={"shellcheck": "/opt/bin/shellcheck"})
        self.mock_staged.return_value = ["build.sh", "deploy.bash"]
        runner = make_runner()

        assert self.check(runner) == 0
        assert runner.calls == [("/opt/bin/shellcheck", "--format", "gcc", "deploy.bash")]
