"""
Core building blocks: configuration, logging setup, the in-memory store
and the outcome types returned by the service layer.
"""
