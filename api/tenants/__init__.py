"""
Tenants: records joined to their property, and CRUD.
"""
