from .config_errors import ConfigValidationError, ErrorInfo
from .pipeline_config import DEFAULT_OUTPUT, PipelineConfig

__all__ = [
    "DEFAULT_OUTPUT",
    "ConfigValidationError",
    "ErrorInfo",
    "PipelineConfig",
]
