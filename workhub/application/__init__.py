"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (CQRS)
- queries/   → Read operations (CQRS)
- services/  → Orchestration shared by several handlers (inventory adjustments)
- dto/       → Data Transfer Objects
- common/    → Shared interfaces (Command, Query base classes, actor, audit trail)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
