"""
APPLICATION LAYER - Use Cases & Orchestration

This layer contains:
- commands/  → Write operations (create room, send chat)
- queries/   → Read operations (chat list, room list)
- dto/       → Data Transfer Objects returned to the presentation layer
- common/    → Shared interfaces (Command, Query base classes)

Rules:
- Depends on Domain layer only
- No HTTP/framework code here
- Coordinates entities and repositories
"""
