from typing import List, Literal, Optional

from pydantic import Field

from brickly.Schemas.Listing import CreateListingIn
from brickly.Schemas.base import CamelModel

ImportSource = Literal["PUBLIC", "PARTNER"]


class ImportSearchIn(CamelModel):
    source: ImportSource
    q: Optional[str] = None


class ImportSourceIn(CamelModel):
    source: ImportSource


class ImportConfirmIn(CreateListingIn):
    source: ImportSource
    external_id: str = Field(..., min_length=1)
    attribution: Optional[str] = Field(None, min_length=1)


class ImportSummaryOut(CamelModel):
    external_id: str
    address_line: str
    city: str
    state: str
    zip: str
    list_price: float
    beds: Optional[int] = None
    baths: Optional[float] = None
    thumb_url: Optional[str] = None
    status: str


class MLSListingAdminOut(CamelModel):
    external_id: str
    address: str
    city: str
    state: str
    zip: str
    list_price: float
    status: str
    source_type: ImportSource
    thumb_url: Optional[str] = None


class ImportAddressOut(CamelModel):
    line1: str
    city: str
    state: str
    zip: str


class ImportFactsOut(CamelModel):
    beds: Optional[int] = None
    baths: Optional[float] = None
    sqft: Optional[int] = None
    year_built: Optional[int] = None


class ImportPricingOut(CamelModel):
    list_price: float
    rent_estimate: Optional[float] = None


class ImportDetailOut(CamelModel):
    external_id: str
    address: ImportAddressOut
    facts: ImportFactsOut
    pricing: ImportPricingOut
    images: List[str] = []
    thumb_url: Optional[str] = None
    status: str
    attribution: Optional[str] = None
