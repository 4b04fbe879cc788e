"""
Option Store Service

Read and write named options. Each option holds a JSON-serializable mapping.
"""

from collections.abc import Mapping

from models import db, Option


def _find(name):
    return Option.query.filter_by(name=name).first()


def option_exists(name):
    """Return True if an option with this name is stored."""
    return _find(name) is not None


def get_option(name, default=None):
    """Return the stored value of an option, or default if it does not exist."""
    option = _find(name)
    if option is None or option.value is None:
        return default
    return option.value


def add_option(name, value):
    """
    Store a new option.

    Does nothing if the option already exists.
    Returns True if the option was created.
    """
    if option_exists(name):
        return False
    db.session.add(Option(name=name, value=value))
    db.session.commit()
    return True


def update_option(name, value):
    """Store value under name, creating the option if needed."""
    option = _find(name)
    if option is None:
        option = Option(name=name)
        db.session.add(option)
    # Assign a copy so SQLAlchemy sees the JSON column as changed
    option.value = dict(value) if isinstance(value, Mapping) else value
    db.session.commit()
    return option
