"""Photovoltaic yield estimate from daylight duration."""

# Installed panel power (kW) and overall conversion efficiency
INSTALLED_POWER_KW = 2.5
EFFICIENCY = 0.2

SECONDS_PER_HOUR = 3600


def estimate_energy(
    daylight_seconds: float,
    installed_power_kw: float = INSTALLED_POWER_KW,
    efficiency: float = EFFICIENCY,
) -> float:
    """Estimated energy (kWh) generated over one day of daylight."""
    daylight_hours = max(0.0, daylight_seconds) / SECONDS_PER_HOUR
    return installed_power_kw * daylight_hours * efficiency
