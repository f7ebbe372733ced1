"""
Pydantic schema definitions for API payloads.

Schemas describe what the service puts on the wire.  They are kept
apart from the service layer so that the representation of a joke can
change without touching the data it is built from.
"""
