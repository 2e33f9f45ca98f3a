"""
Todo Service package.

This module marks the 'src.api' directory as a Python package. The FastAPI
application lives in 'src.api.main' (``app`` / ``create_app``); the storage
gateway and the todo service live in 'src.api.db' and 'src.api.services'.
"""
