"""Error kinds raised by the pacstrap action, each with a stable code."""

from __future__ import annotations

from typing import Optional


class PacstrapActionError(RuntimeError):
    """Base error carrying a machine-readable code, an optional hint and cause."""

    code = "E_ACTION"

    def __init__(
        self,
        message: str,
        *,
        hint: Optional[str] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.hint = hint
        self.cause = cause

    def __str__(self) -> str:
        msg = super().__str__()
        if self.hint:
            return f"{msg}\nHint: {self.hint}"
        return msg

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {"code": self.code, "message": super().__str__()}
        if self.hint is not None:
            payload["hint"] = self.hint
        return payload


class CommandError(PacstrapActionError):
    code = "E_COMMAND"

    def __init__(self, message: str, *, argv: list[str], returncode: int, output: str = "") -> None:
        super().__init__(message)
        self.argv = argv
        self.returncode = returncode
        self.output = output


class RecipeError(PacstrapActionError):
    code = "E_RECIPE"


class ConfigWriteError(PacstrapActionError):
    code = "E_CONFIG_WRITE"


class ConfigCopyError(PacstrapActionError):
    code = "E_CONFIG_COPY"


class DirectoryCreateError(PacstrapActionError):
    code = "E_DIRECTORY_CREATE"


class KeyringInitError(PacstrapActionError):
    code = "E_KEYRING_INIT"


class KeyringPopulateError(PacstrapActionError):
    code = "E_KEYRING_POPULATE"


class PackageInstallError(PacstrapActionError):
    code = "E_PACKAGE_INSTALL"

    @property
    def returncode(self) -> Optional[int]:
        return getattr(self.cause, "returncode", None)
