"""
Service layer abstraction.

Services encapsulate business logic and receive their collaborators
(repository, quote client) through the constructor, so API handlers
never touch storage or external providers directly.
"""
