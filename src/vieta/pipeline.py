"""Round trip of a polynomial document through a file, and derivation of
the constant coefficient from the Base64 encoded roots.

For ax^2 + bx + c = 0 with roots alpha and beta, Vieta's formulas give

    alpha + beta = -b/a
    alpha * beta = c/a

so c = a * alpha * beta. The sum relation is only reported, the example
values do not satisfy it.
"""

from __future__ import annotations

import logging
import math
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from . import codec, document, file_store
from .config import PipelineConfig
from .records import (
    A_PATH,
    ALPHA_PATH,
    B_PATH,
    BETA_PATH,
    C_PATH,
    FORM_PATH,
    EncodedRoots,
    Polynomial,
    build_document,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    path: Path
    a: int
    b: int
    alpha: float
    beta: float
    c: float

    @property
    def root_sum(self) -> float:
        return self.alpha + self.beta

    @property
    def root_product(self) -> float:
        return self.alpha * self.beta

    @property
    def expected_root_sum(self) -> float:
        return -float(self.b) / self.a


def _store(path: Path, value: document.Value) -> None:
    file_store.write(path, document.serialize(value) + "\n")


def _decode_root(encoded: str) -> float:
    return codec.parse_decimal(codec.decode_text(encoded))


def write_initial_document(
    config: PipelineConfig, out: TextIO = sys.stdout
) -> document.Value:
    polynomial = Polynomial(a=config.a, b=config.b)
    roots = EncodedRoots.from_plain(config.alpha, config.beta)
    data = build_document(polynomial, roots)
    _store(config.output, data)
    print(f"JSON written to {os.fspath(config.output)}", file=out)
    return data


def complete_document(path: Path, out: TextIO = sys.stdout) -> PipelineResult:
    """Read the document at path, derive c from its roots and write the
    document back with c filled in.

    Nothing is written if reading, decoding or parsing fails.
    """
    loaded = document.parse(file_store.read(path))

    a = document.as_integer(document.get(loaded, A_PATH))
    b = document.as_integer(document.get(loaded, B_PATH))
    alpha = _decode_root(document.as_string(document.get(loaded, ALPHA_PATH)))
    beta = _decode_root(document.as_string(document.get(loaded, BETA_PATH)))

    current_c = document.get(loaded, C_PATH)
    c_text = "null" if document.is_null(current_c) else document.serialize(current_c)
    print("Decoded polynomial and roots:", file=out)
    print(
        f"  Form: {document.as_string(document.get(loaded, FORM_PATH))}", file=out
    )
    print(f"  a = {a}, b = {b}, c = {c_text}", file=out)
    print(f"  alpha (root 1) = {alpha:g}", file=out)
    print(f"  beta  (root 2) = {beta:g}", file=out)

    result = PipelineResult(
        path=Path(path),
        a=a,
        b=b,
        alpha=alpha,
        beta=beta,
        c=float(a) * (alpha * beta),
    )
    print("\nComputed values:", file=out)
    print(
        f"  alpha + beta = {result.root_sum:g} "
        f"(should equal -b/a = {result.expected_root_sum:g})",
        file=out,
    )
    print(f"  alpha * beta = {result.root_product:g} (this equals c/a)", file=out)
    print(f"  Computed constant c = {result.c:g}", file=out)
    if not math.isclose(result.root_sum, result.expected_root_sum):
        logger.warning(
            f"Sum of roots {result.root_sum:g} does not equal "
            f"-b/a = {result.expected_root_sum:g}"
        )

    document.set_value(loaded, C_PATH, result.c)
    _store(path, loaded)
    print(f"\nUpdated JSON with computed c written to {os.fspath(path)}", file=out)
    return result


def run_pipeline(
    config: PipelineConfig | None = None, out: TextIO = sys.stdout
) -> PipelineResult:
    if config is None:
        config = PipelineConfig()
    logger.info(f"Running pipeline with {config}")
    write_initial_document(config, out)
    result = complete_document(config.output, out)
    logger.info(f"Computed c = {result.c} for a = {result.a}, b = {result.b}")
    return result
