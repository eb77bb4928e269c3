METERS_PER_KILOMETER = 1000.0

def meters_to_kilometers(meters: float) -> float:
    """Convert meters to kilometers."""
    return meters / METERS_PER_KILOMETER
