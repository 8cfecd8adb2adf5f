"""
The MODEL layer contains pure data structures and validation logic.
It has NO knowledge of the GUI (Qt).
"""
