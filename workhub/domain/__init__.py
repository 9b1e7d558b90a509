"""
DOMAIN LAYER - Entities, value objects, ports and exceptions.

RULES:
1. NO framework imports (no FastAPI, motor, Pydantic, etc.)
2. NO I/O operations (no database, no HTTP, no file system)
3. Only depends on Python stdlib
"""
