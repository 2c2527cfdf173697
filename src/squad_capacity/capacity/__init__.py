"""
Squad capacity engine.

Pure computation of hours available per member and per day. Data access
lives in squad_capacity.data; rendering in squad_capacity.presentation.
"""
