from datetime import datetime
from typing import Any, Dict
from uuid import UUID

from pydantic import Field

from brickly.Models.KycModel import KycStatus
from brickly.Schemas.Auth import UserAdminOut
from brickly.Schemas.base import CamelModel


class KycSubmitIn(CamelModel):
    data: Dict[str, Any] = Field(default_factory=dict)


class KycDecisionIn(CamelModel):
    user_id: UUID


class KycProfileOut(CamelModel):
    id: str
    user_id: str
    status: KycStatus
    data: Dict[str, Any]
    submitted_at: datetime
    updated_at: datetime


class KycSubmissionOut(KycProfileOut):
    user: UserAdminOut
