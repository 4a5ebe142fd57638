"""
Domain layer.

Pure business model of the platform. Nothing in here imports a web
framework, an ORM or a logger.

This layer contains:
- Entities: the learning plan tree and users
- Value Objects: typed identifiers
- Domain Services: progress rollups, plan construction and template cloning
"""
