"""
Services Package

Business logic modules for the analytics application.
"""

from .options import (
    add_option,
    get_option,
    option_exists,
    update_option,
)

from .settings import (
    is_truthy,
    sanitize_settings,
)

from .tracking import (
    RenderContext,
    build_script,
    render_tracking_script,
    should_emit,
    suppression_reason,
)

from .fields import (
    FIELDS,
    Checkbox,
    FieldConfigurationError,
    Text,
    parse_settings_form,
    render_field,
    render_settings_form,
)

__all__ = [
    # Options
    'add_option',
    'get_option',
    'option_exists',
    'update_option',
    # Settings
    'is_truthy',
    'sanitize_settings',
    # Tracking
    'RenderContext',
    'build_script',
    'render_tracking_script',
    'should_emit',
    'suppression_reason',
    # Fields
    'FIELDS',
    'Checkbox',
    'FieldConfigurationError',
    'Text',
    'parse_settings_form',
    'render_field',
    'render_settings_form',
]
