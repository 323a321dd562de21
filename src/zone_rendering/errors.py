from config import ExitCode


class RenderError(Exception):
    exit_code: ExitCode = ExitCode.RENDER_FAILURE


class ZoneWriteError(Exception):
    exit_code: ExitCode = ExitCode.WRITE_FAILURE


class HookError(Exception):
    """The reload command failed. Zone files written before stay in place."""

    exit_code: ExitCode = ExitCode.HOOK_FAILURE

    def __init__(self, message: str, returncode: int | None = None, output: str | None = None):
        super().__init__(message)
        self.returncode = returncode
        self.output = output
