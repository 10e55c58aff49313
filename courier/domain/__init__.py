"""Domain layer for courier.

Value types and pure checks. Nothing in here knows about ports, adapters
or the command line.
"""
