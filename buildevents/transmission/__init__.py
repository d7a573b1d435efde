"""Transmission module."""

from .sender import HoneycombSender, ISender, WriterSender, create_sender

__all__ = ["HoneycombSender", "ISender", "WriterSender", "create_sender"]
