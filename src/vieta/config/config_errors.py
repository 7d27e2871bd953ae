from __future__ import annotations

from dataclasses import dataclass
from typing import Self

from pydantic import ValidationError


@dataclass
class ErrorInfo:
    message: str
    filename: str | None = None
    field: str | None = None

    def __str__(self) -> str:
        location = ""
        if self.filename is not None:
            location += f"{self.filename}: "
        if self.field is not None:
            location += f"{self.field}: "
        return f"{location}{self.message}"


class ConfigValidationError(ValueError):
    """Contains one or more configuration errors to be shown to the user."""

    def __init__(
        self,
        errors: str | list[ErrorInfo],
        config_file: str | None = None,
    ) -> None:
        self.errors: list[ErrorInfo] = []
        if isinstance(errors, list):
            for err in errors:
                if isinstance(err, ErrorInfo):
                    self.errors.append(err)
        else:
            self.errors.append(ErrorInfo(message=errors, filename=config_file))
        super().__init__(";".join([str(error) for error in self.errors]))

    @classmethod
    def from_pydantic(
        cls, error: ValidationError, config_file: str | None = None
    ) -> Self:
        return cls(
            [
                ErrorInfo(
                    message=pydantic_error["msg"],
                    filename=config_file,
                    field=".".join(str(loc) for loc in pydantic_error["loc"])
                    or None,
                )
                for pydantic_error in error.errors()
            ]
        )

    def cli_message(self) -> str:
        """the configuration error messages as suitable for printing to cli"""
        return "\n".join(self.messages())

    def messages(self) -> list[str]:
        """List of the configuration errors messages with context"""
        return [str(info) for info in sorted(self.errors, key=str)]
