"""
The CONTROLLER layer bridges Qt and the model: it turns key presses into
session events and broadcasts the rendered view through Qt signals.
"""
