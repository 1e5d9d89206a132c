from pydantic import BaseModel, Field, ConfigDict
from typing import Optional
from datetime import datetime


URL_PATTERN = r"^https?://\w+"


class ShortLinkRecord(BaseModel):
    """Store-owned record, as handed to the service layer"""
    id: int = Field(..., ge=0)
    url: str
    created: datetime
    accessed: Optional[datetime] = None
    hits: int = Field(0, ge=0)

    # Reads straight from the SQLAlchemy ShortLink model
    model_config = ConfigDict(from_attributes=True, frozen=True)


class URLCreate(BaseModel):
    """
    Registration request.
    
    The URL is kept exactly as sent: no normalization, so trailing
    slashes, scheme case and query order all make distinct URLs.
    """
    url: str = Field(..., pattern=URL_PATTERN, max_length=1000, description="The URL to shorten")
    password: Optional[str] = Field(None, description="Required when the service has a password")


class URLResponse(BaseModel):
    code: str
    short_url: str
    url: str


class URLStats(BaseModel):
    code: str
    url: str
    hits: int
    created: datetime
    accessed: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
