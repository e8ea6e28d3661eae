"""
Memorial service configurator.

Two independent projections of the same user selections:
- an itemized price quote (pricing_engine)
- a procedural scene layout for the 3D viewer (scene_assembler)
"""
