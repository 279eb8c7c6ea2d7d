"""Shared pytest configuration.

Register *and* load a Hypothesis profile that disables per-example deadlines
so big-integer property tests do not fail spuriously on slower CI machines.
"""

from hypothesis import settings

settings.register_profile("chunkaddr_no_deadline", deadline=None)
settings.load_profile("chunkaddr_no_deadline")
