"""
vieta - derive the constant coefficient of a quadratic polynomial from its
Base64 encoded roots, round tripping the polynomial through a JSON document.
"""

from .config import ConfigValidationError, PipelineConfig
from .pipeline import (
    PipelineResult,
    complete_document,
    run_pipeline,
    write_initial_document,
)
from .records import EncodedRoots, Polynomial, build_document

__all__ = [
    "ConfigValidationError",
    "EncodedRoots",
    "PipelineConfig",
    "PipelineResult",
    "Polynomial",
    "build_document",
    "complete_document",
    "run_pipeline",
    "write_initial_document",
]
