"""
StudyDeck: PHP flashcards and fill-in-code challenges behind a small JSON API.

The storage layer has two interchangeable backends, an in-memory store seeded
with starter content and a SQLAlchemy-backed relational store, chosen once at
startup from DATABASE_URL.
"""
