"""
db/ - Database Layer
====================
Handles PostgreSQL connections, statement execution and schema bootstrap.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
