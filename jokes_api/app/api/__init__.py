"""
API package containing the HTTP routes.

Route modules live in ``endpoints`` and are aggregated by the
top‑level ``router`` in ``router.py``, which the application includes
without a prefix.
"""
