# Static MLS-style dataset served by the "mock" import source and loaded by
# the MLS seed. Ids prefixed "pub-" are PUBLIC, "partner-" are PARTNER.

_UNSPLASH = "https://images.unsplash.com/"

MOCK_LISTINGS = [
    {
        "id": "pub-1001",
        "address": "2140 Sunset Ridge Dr",
        "city": "Austin",
        "state": "TX",
        "zip": "78701",
        "list_price": 685000,
        "rent_estimate": 3400,
        "beds": 3,
        "baths": 2.5,
        "sqft": 1980,
        "year_built": 2006,
        "images": [
            _UNSPLASH + "photo-1568605114967-8130f3a36994",
            _UNSPLASH + "photo-1507089947368-19c1da9775ae",
        ],
        "thumb_url": _UNSPLASH + "photo-1568605114967-8130f3a36994?w=400",
        "status": "ACTIVE",
        "attribution": "Listing data courtesy of Public Records",
    },
    {
        "id": "pub-1002",
        "address": "88 Lakeview Terrace",
        "city": "Denver",
        "state": "CO",
        "zip": "80202",
        "list_price": 742500,
        "rent_estimate": 3650,
        "beds": 4,
        "baths": 3.0,
        "sqft": 2310,
        "year_built": 1998,
        "images": [
            _UNSPLASH + "photo-1449844908441-8829872d2607",
        ],
        "thumb_url": _UNSPLASH + "photo-1449844908441-8829872d2607?w=400",
        "status": "ACTIVE",
        "attribution": "Listing data courtesy of Public Records",
    },
    {
        "id": "pub-1003",
        "address": "501 Maple Ave Unit 12",
        "city": "Nashville",
        "state": "TN",
        "zip": "37203",
        "list_price": 415000,
        "rent_estimate": 2300,
        "beds": 2,
        "baths": 2.0,
        "sqft": 1120,
        "year_built": 2015,
        "images": [
            _UNSPLASH + "photo-1512917774080-9991f1c4c750",
            _UNSPLASH + "photo-1494526585095-c41746248156",
        ],
        "thumb_url": _UNSPLASH + "photo-1512917774080-9991f1c4c750?w=400",
        "status": "ACTIVE",
        "attribution": "Listing data courtesy of Public Records",
    },
    {
        "id": "pub-1004",
        "address": "19 Harbor Way",
        "city": "San Diego",
        "state": "CA",
        "zip": "92101",
        "list_price": 1250000,
        "rent_estimate": 5900,
        "beds": 3,
        "baths": 2.0,
        "sqft": 1760,
        "year_built": 1987,
        "images": [
            _UNSPLASH + "photo-1484154218962-a197022b5858",
        ],
        "thumb_url": _UNSPLASH + "photo-1484154218962-a197022b5858?w=400",
        "status": "PENDING",
        "attribution": "Listing data courtesy of Public Records",
    },
    {
        "id": "partner-2001",
        "address": "730 Cedar Loop",
        "city": "Portland",
        "state": "OR",
        "zip": "97205",
        "list_price": 599000,
        "rent_estimate": 2950,
        "beds": 3,
        "baths": 2.0,
        "sqft": 1640,
        "year_built": 2001,
        "images": [
            _UNSPLASH + "photo-1449844908441-8829872d2607",
            _UNSPLASH + "photo-1512917774080-9991f1c4c750",
        ],
        "thumb_url": _UNSPLASH + "photo-1449844908441-8829872d2607?w=400",
        "status": "ACTIVE",
        "attribution": "Courtesy of Cascade Partner Realty",
    },
    {
        "id": "partner-2002",
        "address": "1205 Bayshore Blvd",
        "city": "Tampa",
        "state": "FL",
        "zip": "33602",
        "list_price": 910000,
        "rent_estimate": 4700,
        "beds": 4,
        "baths": 3.5,
        "sqft": 2650,
        "year_built": 2011,
        "images": [
            _UNSPLASH + "photo-1568605114967-8130f3a36994",
        ],
        "thumb_url": _UNSPLASH + "photo-1568605114967-8130f3a36994?w=400",
        "status": "ACTIVE",
        "attribution": "Courtesy of Gulf Coast Partner Homes",
    },
    {
        "id": "partner-2003",
        "address": "44 Peachtree Pl",
        "city": "Atlanta",
        "state": "GA",
        "zip": "30303",
        "list_price": 365000,
        "rent_estimate": 2100,
        "beds": 2,
        "baths": 1.0,
        "sqft": 980,
        "year_built": 1972,
        "images": [
            _UNSPLASH + "photo-1507089947368-19c1da9775ae",
        ],
        "thumb_url": _UNSPLASH + "photo-1507089947368-19c1da9775ae?w=400",
        "status": "ACTIVE",
        "attribution": "Courtesy of Peach State Partners",
    },
]
