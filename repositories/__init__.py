"""
repositories/ - Data Access Layer
==================================
The generic Mapper sits between table gateways and domain models: it
receives raw rows from a gateway and returns populated model objects.
"""
