"""Rush alert classification: can the rider still make it?"""

import math

from rush_runner.domain.models.rush_alert import RushAssessment, RushTier

WALK_SPEED_MPS = 1.4
RUN_SPEED_MPS = 4.0

# Safety margins on top of the travel time
WALK_BUFFER_SECONDS = 60.0
RUN_BUFFER_SECONDS = 10.0

EARTH_RADIUS_METERS = 6_371_000.0


def classify(distance_meters: float, seconds_until_departure: float) -> RushAssessment:
    """Classify whether a departure is reachable on foot.

    SAFE when walking arrives with a minute to spare, WARNING when only running
    arrives (ten seconds to spare), DANGER otherwise. First match wins.

    Args:
        distance_meters: Straight-line distance to the station.
        seconds_until_departure: Time budget until the train leaves.

    Returns:
        The tier together with the walking and running ETAs in seconds.

    Raises:
        ValueError: If the distance is negative.
    """
    if distance_meters < 0:
        raise ValueError(f"distance_meters must not be negative, got {distance_meters}")

    eta_walk = distance_meters / WALK_SPEED_MPS
    eta_run = distance_meters / RUN_SPEED_MPS

    if seconds_until_departure > eta_walk + WALK_BUFFER_SECONDS:
        tier = RushTier.SAFE
    elif seconds_until_departure > eta_run + RUN_BUFFER_SECONDS:
        tier = RushTier.WARNING
    else:
        tier = RushTier.DANGER

    return RushAssessment(tier=tier, eta_walk_seconds=eta_walk, eta_run_seconds=eta_run)


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two coordinates (haversine formula)."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_METERS * c
