"""
Extensions module to avoid circular imports.

Holds the Flask extension instances. They are bound to an application
inside create_app() with init_app(); nothing here opens a connection.
"""
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask_sqlalchemy import SQLAlchemy

# One database handle per process; its engine owns the connection pool
db = SQLAlchemy()
limiter = Limiter(key_func=get_remote_address)
