"""HTTP layer of the worker relay."""
