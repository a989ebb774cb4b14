"""
The MODEL layer contains pure data structures and animation logic.
It has NO knowledge of the GUI (Qt); painting goes through the
DrawingSurface protocol handed in by the caller.
It deals with Geometry, Bloom timing and Layout.
"""
