"""
The MODEL layer contains pure data structures and business logic.
It has NO knowledge of the GUI (Qt).
It deals with matrix parsing, the numeric operations and the session state.
"""
