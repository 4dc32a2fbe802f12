"""Thailand map bounds used to gate external lookups."""

# Map viewport bounds (WGS84), matching the portal's default map extent
TH_MIN_LAT = 6.0
TH_MAX_LAT = 20.0
TH_MIN_LNG = 97.0
TH_MAX_LNG = 106.5

THAILAND_CENTER = (13.736717, 100.523186)


def is_within_thailand(lat: float, lng: float) -> bool:
    """Return True if the point falls inside Thailand's map bounds.

    The box is the portal's map extent, not the national border, so a True
    result only means a province lookup is worth attempting.
    """
    return TH_MIN_LAT <= lat <= TH_MAX_LAT and TH_MIN_LNG <= lng <= TH_MAX_LNG
