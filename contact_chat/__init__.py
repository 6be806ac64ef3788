"""
Contact Chat core — root package.

This package contains the session/authentication and contact management
core of the contact-list chat back end: domain models, the MongoDB user
repository, session and contact services, and the use cases exposed to
the transport layer.
"""
