"""CommNet Calculator Domain Layer.

This package contains the core business logic organized by bounded contexts:
- devices: Antenna definitions, built-in catalog, override/merge rules
- link: Endpoint power combination, max range, signal-strength bands
"""

# Imports alphabetized per project style (isort)
from domain import devices, link

__all__ = ["devices", "link"]
