"""FitCoach -- AI workout generation with a deterministic fallback.

Run the API with ``fitcoach`` (or ``uvicorn fitcoach.main:app``).
"""
