"""
db/ - Database Layer
====================
Connection handling, schema initialization and the table gateways that build
and execute SQL for a single table. This layer only depends on `config` and
`utils`.
"""
