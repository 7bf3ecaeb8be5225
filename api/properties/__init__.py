"""
Properties: listing, tenant aggregates and CRUD.
"""
