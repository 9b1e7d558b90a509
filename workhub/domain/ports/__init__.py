"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/       → Data persistence interfaces (MongoDB in production)
- password_hasher.py  → Password hashing (werkzeug in production)
"""
