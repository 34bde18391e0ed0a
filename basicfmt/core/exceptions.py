# basicfmt/core/exceptions.py
# Custom exception hierarchy for basicfmt (pure - no I/O operations)

from pathlib import Path
from typing import Any


# * Format error message for display (pure string formatting, no I/O)
def format_error_message(error_type: str, message: str) -> str:
    return f"[red]{error_type}:[/] {message}"


# * Base exception for basicfmt
class BasicfmtError(Exception):
    pass


# * Caller misuse rejected at the command boundary (e.g. non-positive increment)
class InvalidArgumentError(BasicfmtError):
    def __init__(self, message: str, argument: str, value: Any):
        super().__init__(message)
        self.argument = argument
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"argument={self.argument!r}, value={self.value!r})"
        )


# * Configuration errors
class ConfigurationError(BasicfmtError):
    pass


# * Settings value validation failed
class SettingsValidationError(ConfigurationError):
    def __init__(self, message: str, setting_name: str, value: Any):
        super().__init__(message)
        self.setting_name = setting_name
        self.value = value

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.args[0]!r}, "
            f"setting_name={self.setting_name!r}, value={self.value!r})"
        )


# * Requested dialect is not registered
class DialectNotFoundError(ConfigurationError):
    def __init__(self, message: str, dialect: str):
        super().__init__(message)
        self.dialect = dialect

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, dialect={self.dialect!r})"


# * JSON parsing errors
class JSONParsingError(BasicfmtError):
    pass


# * Base error for file I/O operations
class FileOperationError(BasicfmtError):
    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path) if isinstance(path, str) else path

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.args[0]!r}, path={self.path!r})"


# * Failed to read file
class FileReadError(FileOperationError):
    pass


# * Failed to write file
class FileWriteError(FileOperationError):
    pass
