from datetime import datetime
from uuid import UUID

from pydantic import Field

from brickly.Models.SellOrder import SellOrderStatus
from brickly.Schemas.Auth import UserPublicOut
from brickly.Schemas.Listing import PropertyOut
from brickly.Schemas.base import CamelModel, Count, Money


class InvestBuyIn(CamelModel):
    property_id: UUID
    shares_to_buy: Count = Field(..., examples=[500])


class SellOrderIn(CamelModel):
    property_id: UUID
    shares_for_sale: Count = Field(..., examples=[500])
    ask_price_per_share: Money = Field(..., examples=[185.0], description="Price per share in USD")


class MarketBuyIn(CamelModel):
    sell_order_id: UUID
    shares_to_buy: Count = Field(..., examples=[200])


class HoldingOut(CamelModel):
    id: str
    user_id: str
    share_class_id: str
    shares_owned: int
    updated_at: datetime


class PortfolioShareClassOut(CamelModel):
    id: str
    total_shares: int
    shares_available: int
    reference_price_per_share: float


class PortfolioEntryOut(CamelModel):
    id: str
    shares_owned: int
    updated_at: datetime
    percent: float
    property: PropertyOut
    share_class: PortfolioShareClassOut


class SellOrderOut(CamelModel):
    id: str
    user_id: str
    property_id: str
    shares_for_sale: int
    ask_price_per_share: float
    status: SellOrderStatus
    created_at: datetime


class SellOrderListingOut(SellOrderOut):
    property: PropertyOut
    user: UserPublicOut


class TradeOut(CamelModel):
    id: str
    sell_order_id: str
    property_id: str
    buyer_user_id: str
    seller_user_id: str
    shares_traded: int
    price_per_share: float
    created_at: datetime


class MarketBuyOut(CamelModel):
    trade: TradeOut
    order: SellOrderOut
    holding: HoldingOut

