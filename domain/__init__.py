"""
Domain layer - Business entities, models, schemas, and enums.

Submodules are imported explicitly (``domain.enums``, ``domain.models``,
``domain.schemas``, ``domain.values``) so that configuration can depend on
the enums without pulling in the ORM layer.
"""
