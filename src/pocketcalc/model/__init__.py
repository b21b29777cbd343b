"""
The MODEL layer contains the calculator's pure data structures and logic.
It has NO knowledge of the GUI (Qt).
It deals with input events, the state machine and display formatting.
"""
