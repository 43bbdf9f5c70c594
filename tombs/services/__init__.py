"""Simulation services operating on a ``GameSession``.

Modules here take the session explicitly; none of them hold global state.
"""
