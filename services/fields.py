"""
Settings Form Fields

Declarative table of the settings form controls and the functions that
render them and read them back from a submitted form.
"""

import re
from collections import namedtuple
from collections.abc import Mapping

from flask import current_app
from markupsafe import Markup

from constants.analytics import OPTION_NAME, TRACKING_ID_PLACEHOLDER
from .options import add_option, get_option


class FieldConfigurationError(ValueError):
    """Raised when a settings field descriptor is missing required arguments."""
    pass


def render_input(attributes):
    """Render a single <input> element, escaping every attribute value."""
    parts = [Markup('<input')]
    for key, value in attributes.items():
        if value is None:
            continue
        parts.append(Markup(' {}="{}"').format(key, value))
    parts.append(Markup('>'))
    return Markup('').join(parts)


class Checkbox:
    """Checkbox paired with a hidden 0 input so unchecked boxes still submit."""

    def render(self, attributes, value):
        hidden = dict(attributes, id=attributes['id'] + '_hidden', type='hidden', value='0')
        checkbox = dict(attributes, type='checkbox', value='1')
        if value and value != '0':
            checkbox['checked'] = 'checked'
        return render_input(hidden) + render_input(checkbox)


class Text:
    """Single-line text input with a placeholder hint."""

    def __init__(self, placeholder=''):
        self.placeholder = placeholder

    def render(self, attributes, value):
        text = dict(attributes, type='text', placeholder=self.placeholder)
        if value is not None:
            text['value'] = value
        return render_input(text)


FieldSpec = namedtuple('FieldSpec', ['name', 'label', 'control'])

# Form fields in display order
FIELDS = (
    FieldSpec('enabled', 'Enable Google Analytics', Checkbox()),
    FieldSpec('tracking_id', 'Tracking ID', Text(TRACKING_ID_PLACEHOLDER)),
    FieldSpec('force_ssl', 'Force SSL', Checkbox()),
    FieldSpec('anonymize_ip', 'Enable anonymized IP', Checkbox()),
    FieldSpec('track_admin', 'Enable admin user tracking (outside CMS)', Checkbox()),
)

FIELDS_BY_NAME = {spec.name: spec for spec in FIELDS}


def field_input_name(field, option_name=OPTION_NAME):
    return '%s[%s]' % (option_name, field)


def render_field(args, options, option_name=OPTION_NAME):
    """
    Render the control(s) for one settings field.

    Args:
        args: Field descriptor with 'field' (the settings key) and
            'label_for' (the element id)
        options: The stored settings record (may be None)
        option_name: Name of the option the form writes to

    Raises:
        FieldConfigurationError: If the descriptor is incomplete or names
            an unknown field
    """
    if not args or 'label_for' not in args or 'field' not in args:
        raise FieldConfigurationError('settings field incorrectly configured: %r' % (args,))

    spec = FIELDS_BY_NAME.get(args['field'])
    if spec is None:
        raise FieldConfigurationError('unknown settings field: %r' % args['field'])

    attributes = {
        'id': args['label_for'],
        'name': field_input_name(spec.name, option_name),
    }
    value = (options or {}).get(spec.name)
    return spec.control.render(attributes, value)


def render_settings_form(option_name=OPTION_NAME):
    """
    Render every settings field in table order.

    Stores an empty record the first time the form is shown.
    Returns a list of (field_spec, markup) pairs.
    """
    if add_option(option_name, {}):
        current_app.logger.info('Created empty settings record %r', option_name)
    options = get_option(option_name, {})
    if not isinstance(options, Mapping):
        options = {}

    return [
        (spec, render_field({'field': spec.name, 'label_for': spec.name}, options, option_name))
        for spec in FIELDS
    ]


def parse_settings_form(form, option_name=OPTION_NAME):
    """
    Extract the settings fields from a submitted form.

    Checkbox fields are submitted twice (hidden 0, then checkbox 1);
    the last submitted value wins.
    """
    pattern = re.compile(r'%s\[(\w+)\]' % re.escape(option_name))
    raw_input = {}
    for key in form.keys():
        match = pattern.fullmatch(key)
        if match:
            values = form.getlist(key)
            raw_input[match.group(1)] = values[-1] if values else ''
    return raw_input
