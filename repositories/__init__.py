"""
repositories/ - Data Access Layer
==================================
SQL for the Employees table, the field descriptor table it is built from,
value coercion at the database boundary, and the error taxonomy.
Repositories receive raw rows from the database and return domain model objects.
"""
