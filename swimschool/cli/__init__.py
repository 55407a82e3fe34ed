"""
Console surface for the school.

Prompts, menu loop and text tables. Everything here is presentation;
the booking decisions live in core.booking.
"""

from .console import Console

__all__ = ["Console"]
