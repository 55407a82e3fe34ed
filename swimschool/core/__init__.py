"""
Core business logic for lesson booking.

This module is framework-agnostic - it doesn't import the console, the
settings layer, or any storage implementation. The stores it needs are
described as Protocols and handed in through the school context.
"""
