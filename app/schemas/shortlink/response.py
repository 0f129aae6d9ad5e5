from pydantic import BaseModel, Field
from typing import Optional, List

# Response DTOs
# Python fields are snake_case, JSON keys are camelCase.
class GenerateResponse(BaseModel):
    success: bool = True
    original_url: str = Field(..., alias="originalUrl")
    short_link: str = Field(..., alias="shortLink")
    short_url: str = Field(..., alias="shortUrl")
    algorithm: str
    timestamp: int

    model_config = {"populate_by_name": True}


class BatchItem(BaseModel):
    original_url: str = Field(..., alias="originalUrl")
    short_link: str = Field(..., alias="shortLink")

    model_config = {"populate_by_name": True}


class BatchGenerateResponse(BaseModel):
    success: bool = True
    count: int
    results: List[BatchItem]
    timestamp: int


class CustomLengthResponse(BaseModel):
    success: bool = True
    original_url: str = Field(..., alias="originalUrl")
    short_link: str = Field(..., alias="shortLink")
    length: int
    timestamp: int

    model_config = {"populate_by_name": True}


class ValidateResponse(BaseModel):
    success: bool = True
    short_link: str = Field(..., alias="shortLink")
    is_valid: bool = Field(..., alias="isValid")
    message: str
    length: Optional[int] = None

    model_config = {"populate_by_name": True}


class GenerationStats(BaseModel):
    total_generated: int = Field(..., alias="totalGenerated")
    supported_algorithms: List[str] = Field(..., alias="supportedAlgorithms")
    default_length: int = Field(..., alias="defaultLength")
    character_set_size: int = Field(..., alias="characterSetSize")
    possible_combinations: int = Field(..., alias="possibleCombinations")
    timestamp: int

    model_config = {"populate_by_name": True}


class StatsResponse(BaseModel):
    success: bool = True
    stats: GenerationStats


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    timestamp: int
