# Utility modules for the analytics app
from .sanitizer import strip_tags, strip_slashes, sanitize_setting_text
