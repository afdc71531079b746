"""
The MODEL layer contains the recursive fractal generators and the drawing
surface protocol they paint on.
It has NO knowledge of the GUI (Qt). Generators only see a `DrawingSurface`.
"""
