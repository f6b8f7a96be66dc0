"""
The VIEW layer bridges the navigation history and the PyVista camera.
"""
