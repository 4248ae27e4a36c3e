"""
Theatrical
----------
Curation tooling for a crowd-populated dataset of theatrical records.

Subpackages:
    - core: paths, exceptions, logging
    - database: ORM models, session management, record repository
    - curation: sanitization, role consolidation, orphan cleanup
"""
