"""
Student Registry backend.

A FastAPI service that registers student records in a MongoDB collection.
"""
