"""
db/ - Database Layer
====================
Provider capabilities (sqlite, PostgreSQL), connection acquisition and
schema initialization for the Employees table.
"""
