"""
Mobile API Backend — Contact Info Schema
=========================================

What:  Shape of the static Contact Us payload. `location` carries the map
       region the app centers on (react-native-maps style deltas).
"""

from mobile_api.schemas.common import CamelModel


class MapRegion(CamelModel):
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float


class ContactInfo(CamelModel):
    email: str
    website: str
    office_address: str
    location: MapRegion
    google_maps_link: str
    availability: str
