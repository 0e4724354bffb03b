"""Roster System package.

An in-memory class roster with per-student attendance toggles, organized like
the rest of our feature packages: a plain store/service layer and a thin Flask
controller layer on top.
"""
