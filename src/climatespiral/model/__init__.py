"""
The MODEL layer contains pure data structures and the spiral geometry.
It has NO knowledge of the GUI (Qt).
It deals with radius mappings, colours, the anomaly table and playback state.
"""
