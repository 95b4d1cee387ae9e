"""Health-check payload for the calculator API."""

SERVICE_NAME = "behivest-calculators"


def get_ping_message() -> str:
    return "pong"
