"""
services/ - Business Layer
==========================
Catalog use cases built on top of the mappers.
"""
