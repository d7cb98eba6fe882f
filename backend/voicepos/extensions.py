# Overview: Flask extension instances for the in-memory record store.

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
