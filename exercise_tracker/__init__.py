"""Exercise Tracker — users, logged exercises, and filtered exercise logs over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
