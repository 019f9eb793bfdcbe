"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories receive a `Database` handle, run parameterized statements
through it and return domain model objects.
"""
