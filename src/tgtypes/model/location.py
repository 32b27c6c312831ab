from pydantic import BaseModel


class Location(BaseModel):
    """https://core.telegram.org/bots/api#location"""
    longitude: float
    latitude: float
    horizontal_accuracy: float | None = None  # meters, 0-1500
    live_period: int | None = None
    heading: int | None = None  # degrees, 1-360
    proximity_alert_radius: int | None = None


class Venue(BaseModel):
    """https://core.telegram.org/bots/api#venue"""
    location: Location
    title: str
    address: str
    foursquare_id: str | None = None
    foursquare_type: str | None = None
    google_place_id: str | None = None
    google_place_type: str | None = None
