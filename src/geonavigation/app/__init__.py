"""
The APP layer wires the navigation history into a Qt viewer: signals for
widgets and debounced auto-recording of camera moves.
"""
