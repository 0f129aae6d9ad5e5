# re-export common schemas for simpler imports
from .shortlink.request import (
    GenerateRequest,
    AlgorithmGenerateRequest,
    CustomLengthRequest,
    BatchGenerateRequest,
)
from .shortlink.response import (
    GenerateResponse,
    BatchItem,
    BatchGenerateResponse,
    CustomLengthResponse,
    ValidateResponse,
    GenerationStats,
    StatsResponse,
    ErrorResponse,
)

__all__ = [
    "GenerateRequest",
    "AlgorithmGenerateRequest",
    "CustomLengthRequest",
    "BatchGenerateRequest",
    "GenerateResponse",
    "BatchItem",
    "BatchGenerateResponse",
    "CustomLengthResponse",
    "ValidateResponse",
    "GenerationStats",
    "StatsResponse",
    "ErrorResponse",
]
