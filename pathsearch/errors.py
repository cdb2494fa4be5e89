"""Domain exceptions for executable lookup and CLI diagnostics."""

from __future__ import annotations


_NOT_FOUND_HINT = "Specify a full path to the executable or add its folder to PATH."


class LookupStageError(RuntimeError):
    """Raised when a specific lookup stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped lookup error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class ExecutableNotFoundError(FileNotFoundError):
    """Raised when an executable cannot be located by direct path or PATH search."""

    stage = "resolve"

    def __init__(
        self,
        *,
        executable: str,
        detail: str | None = None,
        hint: str | None = _NOT_FOUND_HINT,
    ) -> None:
        """Initialize a not-found error for the requested executable."""

        if detail is None:
            label = executable if executable else "(empty path)"
            detail = (
                f"Executable `{label}` could not be found. "
                "Please specify a full path or add its folder to your PATH."
            )
        super().__init__(detail)
        self.executable = executable
        self.detail = detail
        self.hint = hint

    def __str__(self) -> str:
        return self.detail
