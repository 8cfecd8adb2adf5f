"""
The APP layer: Qt bootstrap, the session store and the widgets.
"""
