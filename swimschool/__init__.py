"""
SwimSchool - lesson booking for a junior swimming school.

This package contains the complete application:
- core: Framework-agnostic booking rules, entities and reports
- infrastructure: In-memory stores and seed data
- cli: Interactive console menu
- config: Application configuration
"""

__version__ = "0.1.0"
