"""
Procedural layout generators.

Deterministic given a random.Random: each generator turns the venue
structure, the performance profile and the user's style choices into a
list of PlacedInstance for one SceneDescriptor group.
"""
