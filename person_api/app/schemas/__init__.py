"""
Pydantic schema definitions for API payloads.

Persons and orders are exchanged as camelCase JSON; the models use
snake_case attributes with camelCase aliases and accept either form
on input.
"""
