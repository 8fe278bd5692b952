"""
Mobile API Backend — Contact Info Route
========================================

What:  GET /contact-info returns the company's static contact details for
       the Contact Us screen. No database access.
"""

from fastapi import APIRouter

from mobile_api.schemas.contact import ContactInfo, MapRegion

router = APIRouter(tags=["Contact"])

CONTACT_INFO = ContactInfo(
    email="vishwasritechnologies@vishcom.net",
    website="https://www.vishcom.net",
    office_address=(
        "Vishwasri Technologies H.no: 1-10-74/b&c  Flat no: T - 402/B,  "
        "Technopolis Galada Complex, Dwaraka das colony, Begumpet 500016"
    ),
    location=MapRegion(
        latitude=17.443909,
        longitude=78.463228,
        latitude_delta=0.005,
        longitude_delta=0.005,
    ),
    google_maps_link=(
        "1-10-74/B&C FLAT NO: T-402/B, TECHNOPOLIS GALADA COMPLEX, "
        "DWARAKA DAS COLONY, BEGUMPET 500016"
    ),
    availability="Mon - Sat | 9 AM - 6 PM",
)


@router.get(
    "/contact-info",
    response_model=ContactInfo,
    summary="Company contact and location details",
)
async def get_contact_info() -> ContactInfo:
    return CONTACT_INFO
