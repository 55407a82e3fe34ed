"""
Infrastructure layer - storage and fixture data.

- memory: In-memory stores implementing the engine's store Protocols
- seed: Demo timetable, learners, bookings and reviews

These modules depend on the core; the core never imports them.
"""
