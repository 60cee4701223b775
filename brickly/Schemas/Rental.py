from datetime import datetime
from typing import List, Optional
from uuid import UUID

from brickly.Models.RentalApplicationModel import RentalApplicationStatus
from brickly.Schemas.Auth import UserAdminOut
from brickly.Schemas.Listing import ImageOut, PropertyOut
from brickly.Schemas.base import CamelModel, Money


class RentalApplyIn(CamelModel):
    property_id: UUID


class RentalDecisionIn(CamelModel):
    application_id: UUID
    rent_amount: Optional[Money] = None


class RentListIn(CamelModel):
    property_id: UUID


class RentalPropertyOut(PropertyOut):
    images: List[ImageOut] = []


class RentalApplicationOut(CamelModel):
    id: str
    property_id: str
    tenant_user_id: str
    status: RentalApplicationStatus
    rent_amount: Optional[float] = None
    created_at: datetime


class RentalApplicationReviewOut(RentalApplicationOut):
    property: PropertyOut
    tenant: UserAdminOut
