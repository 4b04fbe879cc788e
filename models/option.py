"""
Option Model

Contains the Option model, a key-value store where each value is a JSON blob.
"""

from constants.analytics import MAX_OPTION_NAME_LENGTH
from .base import db


class Option(db.Model):
    """Named application option holding a serialized mapping."""
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(MAX_OPTION_NAME_LENGTH), unique=True, nullable=False, index=True)
    value = db.Column(db.JSON, nullable=True)
