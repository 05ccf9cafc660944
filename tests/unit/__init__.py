"""Unit tests.

One module at a time: value objects, inventories, centers, handlers, the
message bus, settings and logging helpers. Keep them fast and deterministic;
threads are used only where the behavior under test is locking.
"""
