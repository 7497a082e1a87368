class GoHooksError(Exception):
    pass


class GoHooksUsageError(GoHooksError):
    pass


class GoHooksGitError(GoHooksError):
    pass


class GoHooksConfigError(GoHooksError):
    pass


class GoHooksToolNotFoundError(GoHooksError):

    def __init__(self, tool: str):
        super().__init__(f"{tool}: command not found")
        self.tool = tool
