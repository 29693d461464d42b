"""
Boundary layer.

Everything that talks to infrastructure lives here. For LearnHub that is the
relational store: ORM models, CRUD singletons, engine and session handling.
"""
