"""Health-check reply."""


def get_ping_message() -> str:
    return "pong"
