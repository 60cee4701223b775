from datetime import datetime
from typing import List, Optional

from pydantic import Field, StrictInt, field_validator

from brickly.Models.ListingModel import ListingStatus
from brickly.Models.PropertyModel import PropertyStatus, PropertyType, SourceType
from brickly.Schemas.Auth import UserPublicOut
from brickly.Schemas.base import CamelModel, Count, Money, Percent, check_http_urls


class PropertyIn(CamelModel):
    type: Optional[PropertyType] = None
    address1: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip: str = Field(..., min_length=1)
    square_feet: Optional[StrictInt] = Field(None, gt=0)
    bedrooms: Optional[StrictInt] = Field(None, gt=0)
    bathrooms: Optional[StrictInt] = Field(None, gt=0)
    target_raise: Optional[Money] = None
    est_monthly_rent: Optional[Money] = None


class ListingIn(CamelModel):
    asking_price: Money
    bonus_percent: Percent


class ShareClassIn(CamelModel):
    total_shares: Count
    reference_price_per_share: Money


class CreateListingIn(CamelModel):
    property: PropertyIn
    listing: ListingIn
    share_class: ShareClassIn
    images: List[str] = Field(default_factory=list)

    @field_validator("images")
    @classmethod
    def images_are_urls(cls, images):
        return check_http_urls(images)


class PropertyUpdateIn(CamelModel):
    type: Optional[PropertyType] = None
    address1: Optional[str] = Field(None, min_length=1)
    city: Optional[str] = Field(None, min_length=1)
    state: Optional[str] = Field(None, min_length=1)
    zip: Optional[str] = Field(None, min_length=1)
    square_feet: Optional[StrictInt] = Field(None, gt=0)
    bedrooms: Optional[StrictInt] = Field(None, gt=0)
    bathrooms: Optional[StrictInt] = Field(None, gt=0)
    target_raise: Optional[Money] = None
    est_monthly_rent: Optional[Money] = None


class ListingUpdateFieldsIn(CamelModel):
    asking_price: Optional[Money] = None
    bonus_percent: Optional[Percent] = None


class ListingUpdateIn(CamelModel):
    property: Optional[PropertyUpdateIn] = None
    listing: Optional[ListingUpdateFieldsIn] = None


class ImageOut(CamelModel):
    id: str
    url: str
    sort_order: int


class ShareClassOut(CamelModel):
    id: str
    property_id: str
    total_shares: int
    shares_available: int
    reference_price_per_share: float


class PropertyOut(CamelModel):
    id: str
    type: PropertyType
    address1: str
    city: str
    state: str
    zip: str
    status: PropertyStatus
    square_feet: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    target_raise: Optional[float] = None
    est_monthly_rent: Optional[float] = None
    source_type: SourceType
    source_ref_id: Optional[str] = None
    imported_at: Optional[datetime] = None
    source_attribution: Optional[str] = None
    created_at: datetime


class ListingOut(CamelModel):
    id: str
    property_id: str
    lister_user_id: str
    asking_price: float
    bonus_percent: float
    status: ListingStatus
    posted_at: datetime


class ListingWithListerOut(ListingOut):
    lister: UserPublicOut


class PropertyDetailOut(PropertyOut):
    listings: List[ListingWithListerOut] = []
    images: List[ImageOut] = []
    share_class: Optional[ShareClassOut] = None


class PropertyWithMediaOut(PropertyOut):
    images: List[ImageOut] = []
    share_class: Optional[ShareClassOut] = None


class ListingDetailOut(ListingOut):
    property: PropertyWithMediaOut


class CreatedListingOut(CamelModel):
    property: PropertyOut
    listing: ListingOut
    share_class: ShareClassOut
    images_created: int
