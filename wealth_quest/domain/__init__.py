"""Domain layer (pure game logic).

- Keep board content, game rules and the turn reducer here.
- Avoid I/O: no DB sessions, no HTTP/FastAPI, no files.
- Prefer deterministic functions (randomness is passed in as a numpy Generator).
"""
