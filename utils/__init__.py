"""
Utilities Package

Logging setup shared by the application factory.
"""
