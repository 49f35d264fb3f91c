"""Pydantic schema for the ping endpoint."""

from typing import List

from pydantic import BaseModel


class PingResponse(BaseModel):
    message: str
    service: str
    compoundingFrequencies: List[str]
    contributionFrequencies: List[str]
