from pydantic import BaseModel
from typing import Optional, List

# Request DTOs
# url is optional at the schema level so a missing URL is reported the same
# way as an empty one (400 from the service) instead of a 422.
class GenerateRequest(BaseModel):
    url: Optional[str] = None


class AlgorithmGenerateRequest(GenerateRequest):
    algorithm: Optional[str] = None


class CustomLengthRequest(GenerateRequest):
    length: Optional[int] = None


class BatchGenerateRequest(BaseModel):
    urls: Optional[List[str]] = None
