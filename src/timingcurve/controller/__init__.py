"""
The CONTROLLER layer translates user input and timer ticks into model
updates. It owns the Qt timers but never paints anything.
"""
