"""Integration tests.

bootstrap() wiring, settings read from the environment, and command flows
that cross the message bus, handlers, registry and inventories together.
"""
