"""Application layer - Use cases and orchestration.

Structure:
- commands/: Write intents (create, update, delete, export)
- queries/: Read intents (get, list)
- services/: ResourceService and the optimistic concurrency guard
- dtos/: Results returned to the presentation layer
- errors/: Application-level error wrapping

The application layer orchestrates domain logic and ports but contains no
persistence or transport code.
"""
