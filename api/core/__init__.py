"""
Shared, cross-cutting code for the API.

`core/` should contain small building blocks that multiple features use
(store wiring, schema, errors, input checks). Keep feature-specific SQL and
business logic in the corresponding feature package (e.g. `properties/`).
"""
