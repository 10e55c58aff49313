"""Click commands registered on the ``courier`` group."""
