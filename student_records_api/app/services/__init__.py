"""
Service layer abstraction.

Services encapsulate business logic and receive their storage
collaborator through the constructor, so the API handlers never talk
to the database directly.
"""
