"""
Service layer.

Business rules live here, independent of FastAPI: the field validation
gate and the registration service built on top of the store.
"""
