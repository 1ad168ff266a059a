"""Domain models for artist-alley booth tracking.

Participants, booths and the per-artist stock ledger live here. They are
plain in-memory objects so that business rules can be exercised without any
I/O; the only side channel is the notice sink an ``Artist`` writes to.
"""

__all__ = [
    "artist",
    "booth",
    "participant",
    "stock",
]
