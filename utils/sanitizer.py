"""
Input Sanitization Module

Strips markup and form-encoding escapes from submitted settings values
to prevent stored script injection through the settings form.
"""

import re

from bs4 import BeautifulSoup

# A backslash and the character it escapes (or a lone trailing backslash)
ESCAPE_PATTERN = re.compile(r'\\(.?)', re.DOTALL)


def strip_tags(text):
    """
    Remove HTML tags and comments from text, keeping the text content.

    Character references are decoded, so an encoded tag such as
    '&lt;b&gt;' comes out as '<b>' and is removed on the next pass of
    sanitize_setting_text().
    """
    if not text:
        return ''

    # Nothing to parse
    if '<' not in text and '&' not in text:
        return text

    return BeautifulSoup(text, 'html.parser').get_text()


def strip_slashes(text):
    """
    Remove escaping backslashes.

    A backslash followed by a character is replaced by that character,
    so '\\\\' becomes a single backslash and a trailing backslash is dropped.
    """
    if not text:
        return ''
    return ESCAPE_PATTERN.sub(r'\1', text)


def sanitize_setting_text(value):
    """
    Sanitize a single submitted settings value.

    Tags are stripped first, then escaping backslashes. Both steps are
    repeated until the value stops changing, so the result is always a
    fixed point: sanitizing it again returns it unchanged.

    Args:
        value: The submitted value (can be None or a non-string)

    Returns:
        Sanitized string
    """
    if value is None:
        return ''

    if not isinstance(value, str):
        value = str(value)

    # Every pass that changes the value makes it shorter
    while True:
        cleaned = strip_slashes(strip_tags(value))
        if cleaned == value:
            return value
        value = cleaned
