"""
The MODEL layer contains pure data structures and the curve math.
It has NO knowledge of the GUI (Qt).
It deals with coordinate mapping, Bezier geometry and timing functions.
"""
