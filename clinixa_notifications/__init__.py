"""Client-side notification synchronization engine for the Clinixa staff portal.

The package keeps a live, in-memory inventory of a staff user's notifications,
reconciles it against the backend on a fixed cadence and exposes it to the
dropdown and toast consumers.
"""
