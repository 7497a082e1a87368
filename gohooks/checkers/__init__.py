from gohooks.checkers import (
    ascii_filename_checker,
    go_format_checker,
    go_lint_checker,
    go_syntax_checker,
    go_vet_checker,
    shell_lint_checker,
    whitespace_checker,
)
