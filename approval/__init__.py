"""Corporate Approval Package - governance record keeping over a relational store.

Invariants:
    - Package root contains no executable code (no import side-effects)
"""
