"""Domain layer for the Atom feed builder.

This layer contains the canonical feed records and the normalization rules.
It is independent of XML serialization and of the command line.
"""
