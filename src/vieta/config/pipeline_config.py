from __future__ import annotations

import logging
import os
from pathlib import Path
from textwrap import dedent
from typing import Any, Self

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    field_validator,
)

from .config_errors import ConfigValidationError, ErrorInfo

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "polynomial.json"


class PipelineConfig(BaseModel):
    output: Path = Field(
        default=Path(DEFAULT_OUTPUT),
        description=dedent(
            """
            The document file. It is created if absent and overwritten
            if present.
            """
        ),
    )
    a: StrictInt = Field(
        default=2,
        description="The quadratic coefficient of ax^2 + bx + c = 0.",
    )
    b: StrictInt = Field(
        default=-7,
        description="The linear coefficient of ax^2 + bx + c = 0.",
    )
    alpha: str = Field(
        default="2",
        description=(
            "Decimal text of the first root, unquoted numbers are accepted."
        ),
    )
    beta: str = Field(
        default="5",
        description=(
            "Decimal text of the second root, unquoted numbers are accepted."
        ),
    )
    model_config = ConfigDict(
        extra="forbid",
    )

    @field_validator("a")
    @classmethod
    def validate_nonzero_quadratic_coefficient(cls, a: int) -> int:
        if a == 0:
            raise ValueError("The quadratic coefficient a can not be zero")
        return a

    @field_validator("alpha", "beta", mode="before")
    @classmethod
    def numbers_as_decimal_text(cls, root: Any) -> Any:
        # yaml reads unquoted roots as numbers
        if isinstance(root, (int, float)) and not isinstance(root, bool):
            return str(root)
        return root

    @classmethod
    def from_dict(
        cls, config_dict: dict[str, Any], config_file: str | None = None
    ) -> Self:
        try:
            return cls.model_validate(config_dict)
        except ValidationError as err:
            raise ConfigValidationError.from_pydantic(err, config_file) from err

    @classmethod
    def from_file(cls, config_file: str) -> Self:
        """Read a YAML configuration file. Relative output paths are
        taken relative to the directory of the configuration file."""
        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f)
        except OSError as err:
            raise ConfigValidationError(str(err), config_file) from err
        except yaml.YAMLError as err:
            raise ConfigValidationError(
                f"Could not parse yaml: {err}", config_file
            ) from err

        if config_dict is None:
            config_dict = {}
        if not isinstance(config_dict, dict):
            raise ConfigValidationError(
                [
                    ErrorInfo(
                        message="The configuration must be a mapping of keywords",
                        filename=config_file,
                    )
                ]
            )

        config = cls.from_dict(config_dict, config_file)
        if not config.output.is_absolute():
            config_dir = os.path.dirname(os.path.abspath(config_file))
            config = config.model_copy(
                update={"output": Path(config_dir) / config.output}
            )
        logger.info(f"Loaded configuration from {config_file}: {config}")
        return config
