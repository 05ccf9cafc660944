"""Ports used by the service layer: the center registry and id generation."""
