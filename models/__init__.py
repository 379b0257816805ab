"""
models/ - Domain Layer
======================
In-memory representations of catalog records. Every model knows how to fill
itself from a database row and how to turn itself back into one.
"""
