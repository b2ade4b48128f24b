"""Game domain services: hole progression, leaderboard and the janitor.

Routes import from here and keep request parsing and notifications on
their side; nothing in this package touches the request context.
"""
