"""
Service layer abstraction.

Services own the data served by the API handlers.  The jokes service
holds a fixed, in‑memory list compiled into the process.
"""
