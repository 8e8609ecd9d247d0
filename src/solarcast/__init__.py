"""Solarcast: daily weather forecasts with PV yield estimates and period summaries."""

__version__ = "0.1.0"
