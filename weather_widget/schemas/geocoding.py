"""
This module defines schemas for the geocoding API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class GeocodingResult(BaseModel):
    latitude: float = Field(..., description="Latitude of the match")
    longitude: float = Field(..., description="Longitude of the match")
    name: Optional[str] = Field(None, description="Resolved place name")
    country: Optional[str] = Field(None, description="Country of the match")
    timezone: Optional[str] = Field(None, description="IANA timezone of the match")


class GeocodingResponse(BaseModel):
    """
    Geocoding search response.

    The API omits ``results`` entirely when nothing matches.
    """

    results: Optional[List[GeocodingResult]] = None
