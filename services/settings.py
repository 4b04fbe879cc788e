"""
Settings Sanitization Service

Normalizes raw settings form input into the canonical settings record
before it is stored.
"""

from constants.analytics import BOOLEAN_FIELDS
from utils.sanitizer import sanitize_setting_text


def is_truthy(value):
    """String truthiness: anything except '' and '0' is true."""
    return value not in ('', '0')


def sanitize_settings(raw_input, post_filter=None):
    """
    Sanitize Google Analytics settings before saving.

    Every submitted value has tags and escaping backslashes removed.
    Boolean fields are coerced to exactly 0 or 1; a boolean field missing
    from the input becomes 0. Any other field is kept as sanitized text.

    Args:
        raw_input: Mapping of field name to submitted value
        post_filter: Optional callable receiving the normalized dict;
            its return value is the result

    Returns:
        The settings dict, e.g.
        {'enabled': 1, 'tracking_id': 'UA-XXXXXXXX-X', 'force_ssl': 0,
         'anonymize_ip': 0, 'track_admin': 0}
    """
    settings = {}

    for key, value in (raw_input or {}).items():
        settings[key] = sanitize_setting_text(value)

    for field in BOOLEAN_FIELDS:
        settings[field] = 1 if is_truthy(settings.get(field, '')) else 0

    if post_filter is None:
        return settings
    return post_filter(settings)
