"""Jokes API: a FastAPI service serving a fixed list of jokes."""
