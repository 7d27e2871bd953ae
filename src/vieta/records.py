from __future__ import annotations

from typing import Final, Literal, Self

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt

from . import codec
from .document import Value

FORM: Final = "ax^2 + bx + c = 0"

POLYNOMIAL_KEY: Final = "polynomial"
ROOTS_KEY: Final = "roots_base64"

A_PATH: Final = (POLYNOMIAL_KEY, "a")
B_PATH: Final = (POLYNOMIAL_KEY, "b")
C_PATH: Final = (POLYNOMIAL_KEY, "c")
FORM_PATH: Final = (POLYNOMIAL_KEY, "form")
ALPHA_PATH: Final = (ROOTS_KEY, "alpha")
BETA_PATH: Final = (ROOTS_KEY, "beta")


class _Record(BaseModel):
    model_config = ConfigDict(extra="forbid")


class Polynomial(_Record):
    """Coefficients of ax^2 + bx + c = 0, c is None until it is derived
    from the roots."""

    a: StrictInt
    b: StrictInt
    c: StrictInt | StrictFloat | None = None
    form: Literal["ax^2 + bx + c = 0"] = FORM


class EncodedRoots(_Record):
    alpha: str
    beta: str

    @classmethod
    def from_plain(cls, alpha: str, beta: str) -> Self:
        return cls(
            alpha=codec.encode(alpha.encode("utf-8")),
            beta=codec.encode(beta.encode("utf-8")),
        )


def build_document(polynomial: Polynomial, roots: EncodedRoots) -> dict[str, Value]:
    return {
        POLYNOMIAL_KEY: polynomial.model_dump(),
        ROOTS_KEY: roots.model_dump(),
    }
