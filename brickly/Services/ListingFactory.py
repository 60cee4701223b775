from brickly.database import to_cents, utcnow
from brickly.Models.ListingModel import Listing, ListingStatus
from brickly.Models.PropertyModel import Property, PropertyImage, PropertyStatus, PropertyType, SourceType
from brickly.Models.ShareClassModel import ShareClass


def _optional_cents(amount):
    return to_cents(amount) if amount is not None else None


def create_listing_bundle(session, lister_user_id: str, payload, source: SourceType = SourceType.MANUAL,
                          external_id: str = None, attribution: str = None) -> dict:
    """
    Create Property + Listing + ShareClass (+ images) for one listing.
    The whole share class starts in the unissued pool. Manual listings,
    imports and seeds all come through here; the caller commits.
    """
    prop_in = payload.property
    prop = Property(
        type=prop_in.type or PropertyType.HOUSE,
        address1=prop_in.address1,
        city=prop_in.city,
        state=prop_in.state,
        zip=prop_in.zip,
        status=PropertyStatus.LISTED,
        square_feet=prop_in.square_feet,
        bedrooms=prop_in.bedrooms,
        bathrooms=prop_in.bathrooms,
        target_raise_cents=_optional_cents(prop_in.target_raise),
        est_monthly_rent_cents=_optional_cents(prop_in.est_monthly_rent),
        source_type=source,
    )
    if source != SourceType.MANUAL:
        prop.source_ref_id = external_id
        prop.imported_at = utcnow()
        prop.source_attribution = attribution
    session.add(prop)
    session.flush()

    listing = Listing(
        property_id=prop.id,
        lister_user_id=lister_user_id,
        asking_price_cents=to_cents(payload.listing.asking_price),
        bonus_percent=payload.listing.bonus_percent,
        status=ListingStatus.LISTED,
        posted_at=utcnow(),
    )
    share_class = ShareClass(
        property_id=prop.id,
        total_shares=payload.share_class.total_shares,
        shares_available=payload.share_class.total_shares,
        reference_price_per_share_cents=to_cents(payload.share_class.reference_price_per_share),
    )
    session.add(listing)
    session.add(share_class)

    for index, url in enumerate(payload.images):
        session.add(PropertyImage(property_id=prop.id, url=url, sort_order=index))

    session.flush()
    return {
        "property": prop,
        "listing": listing,
        "share_class": share_class,
        "images_created": len(payload.images),
    }
