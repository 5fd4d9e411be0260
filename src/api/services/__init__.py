# This file marks the services package for request-handling logic.
# Service modules turn raw request bytes into rendered pages without touching transport objects.
