"""
Terminal-facing services: the curses wrapper, the renderer and the tick timer.
"""
