"""Error types for credential file management."""

from pathlib import Path


class CredentialFileError(Exception):
    """Credential file error with standard prefix."""

    def __init__(self, message: str) -> None:
        super().__init__(f"[Azure Credential File] {message}")


class MissingCredentialsError(CredentialFileError):
    """Neither the direct env vars nor a bundle file yielded credentials."""

    def __init__(self, env_names: list[str], bundle_env_name: str) -> None:
        self.env_names = env_names
        names = ", ".join(f"${name}" for name in env_names)
        super().__init__(f"{bundle_env_name} is not set. You will need to set the following env vars: {names}")


class _PathError(CredentialFileError):
    """Error tied to a filesystem path, keeping the underlying cause."""

    action = ""

    def __init__(self, path: str | Path, cause: BaseException | None = None) -> None:
        self.path = str(path)
        self.cause = cause
        message = f"error {self.action} {self.path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class BundleReadError(_PathError):
    """The bundle file could not be read."""

    action = "reading credentials file"


class BundleParseError(_PathError):
    """The bundle file is not valid TOML or lacks the credential record."""

    action = "parsing credentials file"


class FileCreateError(_PathError):
    """The credential file could not be written."""

    action = "creating"


class FileDeleteError(_PathError):
    """The credential file could not be removed."""

    action = "removing"


class TemplateError(CredentialFileError):
    """The credential document could not be built from the resolved values."""

