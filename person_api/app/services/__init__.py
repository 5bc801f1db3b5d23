"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works
against the ``PersonStore`` it is constructed with, so API handlers
never touch the store directly.
"""
