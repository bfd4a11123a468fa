"""Daily weather forecasts normalized across third-party providers."""
