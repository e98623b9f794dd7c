# app/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- db: Database configuration and connection management
- errors: Record error taxonomy and HTTP-equivalent statuses
- store: Thin Tortoise ORM access layer with conditional writes
- dispatch: Pattern-keyed message dispatch and reply envelopes
"""
