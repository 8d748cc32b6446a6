"""Application layer for the Atom feed builder.

Holds the feed aggregate and the ports it talks to (XML serializer, logger).
"""
