"""macOS bootstrap (Python-first, manifest-driven).

Core design goals:
- Idempotent installs (probe before every install)
- Declarative package lists in a YAML manifest
- Fail-fast on any external command failure
- Centralized logging
"""

__all__ = []
