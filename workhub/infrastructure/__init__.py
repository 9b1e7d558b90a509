"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: MongoDB implementations (motor repositories, indexes)
- security/: Password hashing (WerkzeugPasswordHasher)
"""
