"""
Share ledger: primary issuance, sell order creation and secondary trades.

Every check-and-mutate step is a single conditional UPDATE whose affected
row count decides success. Nothing here reads a balance and writes it back.
The caller owns the transaction: these functions only flush, and any raised
ApiError must be followed by a rollback (see brickly.database.atomic).

For each share class the following holds after every operation:
    total_shares == shares_available + sum(holding.shares_owned)
"""

from flask import current_app
from sqlalchemy import update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from brickly.database import new_id, utcnow
from brickly.Models.Holdings import Holding
from brickly.Models.SellOrder import SellOrder, SellOrderStatus
from brickly.Models.ShareClassModel import ShareClass
from brickly.Models.Trade import Trade
from brickly.Utils.errors import (
    InsufficientOrderSharesError,
    InsufficientSharesError,
    NotFoundError,
    OrderClosedError,
    SellerInsufficientError,
)

_UPSERT_INSERTS = {
    "postgresql": pg_insert,
    "sqlite": sqlite_insert,
}


def _share_class_for(session, property_id: str) -> ShareClass:
    share_class = session.query(ShareClass).filter_by(property_id=property_id).first()
    if share_class is None:
        raise NotFoundError("Property not found")
    return share_class


def _get_holding(session, user_id: str, share_class_id: str) -> Holding:
    return (
        session.query(Holding)
        .filter_by(user_id=user_id, share_class_id=share_class_id)
        .populate_existing()
        .one()
    )


def credit_holding(session, user_id: str, share_class_id: str, shares: int) -> Holding:
    """Add shares to a user's holding, creating the row on first purchase."""
    now = utcnow()
    insert = _UPSERT_INSERTS.get(session.get_bind().dialect.name)

    if insert is not None:
        stmt = insert(Holding).values(
            id=new_id(),
            user_id=user_id,
            share_class_id=share_class_id,
            shares_owned=shares,
            updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["user_id", "share_class_id"],
            set_={"shares_owned": Holding.shares_owned + shares, "updated_at": now},
        )
        session.execute(stmt)
    else:
        result = session.execute(
            update(Holding)
            .where(Holding.user_id == user_id, Holding.share_class_id == share_class_id)
            .values(shares_owned=Holding.shares_owned + shares, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            session.add(
                Holding(user_id=user_id, share_class_id=share_class_id, shares_owned=shares, updated_at=now)
            )
            session.flush()

    return _get_holding(session, user_id, share_class_id)


def buy_primary_shares(session, user_id: str, property_id: str, shares_to_buy: int) -> Holding:
    """Move shares from the property's unissued pool into the caller's holding."""
    share_class = _share_class_for(session, property_id)

    result = session.execute(
        update(ShareClass)
        .where(ShareClass.id == share_class.id, ShareClass.shares_available >= shares_to_buy)
        .values(shares_available=ShareClass.shares_available - shares_to_buy)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        current_app.logger.warning(
            f"Primary buy rejected for user {user_id}: {shares_to_buy} shares requested "
            f"on property {property_id}, pool too small"
        )
        raise InsufficientSharesError("Not enough shares available")

    holding = credit_holding(session, user_id, share_class.id, shares_to_buy)
    session.expire(share_class)
    return holding


def create_sell_order(
    session, user_id: str, property_id: str, shares_for_sale: int, ask_price_per_share_cents: int
) -> SellOrder:
    """
    List owned shares for sale. Shares are not reserved here; the fill in
    execute_market_buy re-checks the seller's balance.
    """
    share_class = _share_class_for(session, property_id)

    holding = session.query(Holding).filter_by(user_id=user_id, share_class_id=share_class.id).first()
    if holding is None or holding.shares_owned < shares_for_sale:
        raise InsufficientSharesError("Not enough shares owned")

    order = SellOrder(
        user_id=user_id,
        property_id=property_id,
        shares_for_sale=shares_for_sale,
        ask_price_per_share_cents=ask_price_per_share_cents,
        status=SellOrderStatus.OPEN,
    )
    session.add(order)
    session.flush()
    return order


def execute_market_buy(session, buyer_id: str, sell_order_id: str, shares_to_buy: int):
    """
    Fill (part of) a sell order. Returns (trade, order, buyer_holding).
    Seller debit, buyer credit, order decrement and the trade row all live in
    the caller's transaction.
    """
    order = session.get(SellOrder, sell_order_id)
    if order is None:
        raise NotFoundError("Sell order not found")
    if order.status != SellOrderStatus.OPEN:
        raise OrderClosedError()

    share_class = _share_class_for(session, order.property_id)
    now = utcnow()

    seller_debit = session.execute(
        update(Holding)
        .where(
            Holding.user_id == order.user_id,
            Holding.share_class_id == share_class.id,
            Holding.shares_owned >= shares_to_buy,
        )
        .values(shares_owned=Holding.shares_owned - shares_to_buy, updated_at=now)
        .execution_options(synchronize_session=False)
    )
    if seller_debit.rowcount == 0:
        raise SellerInsufficientError()

    holding = credit_holding(session, buyer_id, share_class.id, shares_to_buy)

    order_debit = session.execute(
        update(SellOrder)
        .where(
            SellOrder.id == order.id,
            SellOrder.status == SellOrderStatus.OPEN,
            SellOrder.shares_for_sale >= shares_to_buy,
        )
        .values(shares_for_sale=SellOrder.shares_for_sale - shares_to_buy)
        .execution_options(synchronize_session=False)
    )
    if order_debit.rowcount == 0:
        raise InsufficientOrderSharesError()

    session.execute(
        update(SellOrder)
        .where(SellOrder.id == order.id, SellOrder.shares_for_sale == 0)
        .values(status=SellOrderStatus.FILLED)
        .execution_options(synchronize_session=False)
    )
    session.refresh(order)

    trade = Trade(
        sell_order_id=order.id,
        property_id=order.property_id,
        buyer_user_id=buyer_id,
        seller_user_id=order.user_id,
        shares_traded=shares_to_buy,
        price_per_share_cents=order.ask_price_per_share_cents,
        created_at=now,
    )
    session.add(trade)
    session.flush()

    current_app.logger.info(
        f"Trade {trade.id}: {shares_to_buy} shares of property {order.property_id} "
        f"from {order.user_id} to {buyer_id} at {order.ask_price_per_share_cents / 100.0:.2f}; "
        f"order {order.id} now {order.status.value} with {order.shares_for_sale} left"
    )
    return trade, order, holding
