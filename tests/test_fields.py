"""
Tests for the settings form field table.
"""

import pytest
from bs4 import BeautifulSoup
from werkzeug.datastructures import MultiDict

from constants.analytics import OPTION_NAME
from services.fields import FIELDS, FieldConfigurationError, parse_settings_form, render_field, render_settings_form
from services.options import get_option, option_exists


def inputs(markup):
    return BeautifulSoup(str(markup), 'html.parser').find_all('input')


@pytest.mark.parametrize('args', [
    {},
    None,
    {'field': 'enabled'},
    {'label_for': 'enabled'},
])
def test_incomplete_descriptor_raises(args):
    with pytest.raises(FieldConfigurationError):
        render_field(args, {})


def test_unknown_field_raises():
    with pytest.raises(ValueError):
        render_field({'field': 'colour', 'label_for': 'colour'}, {})


def test_field_table_order():
    assert [spec.name for spec in FIELDS] == ['enabled', 'tracking_id', 'force_ssl', 'anonymize_ip', 'track_admin']


def test_checkbox_has_hidden_zero_input():
    hidden, checkbox = inputs(render_field({'field': 'force_ssl', 'label_for': 'force_ssl'}, {}))

    assert hidden['type'] == 'hidden'
    assert hidden['id'] == 'force_ssl_hidden'
    assert hidden['value'] == '0'
    assert hidden['name'] == 'google_analytics_settings[force_ssl]'

    assert checkbox['type'] == 'checkbox'
    assert checkbox['id'] == 'force_ssl'
    assert checkbox['value'] == '1'
    assert checkbox['name'] == 'google_analytics_settings[force_ssl]'
    assert not checkbox.has_attr('checked')


def test_checkbox_checked_when_stored_true():
    _, checkbox = inputs(render_field({'field': 'enabled', 'label_for': 'enabled'}, {'enabled': 1}))
    assert checkbox['checked'] == 'checked'

    _, checkbox = inputs(render_field({'field': 'enabled', 'label_for': 'enabled'}, {'enabled': 0}))
    assert not checkbox.has_attr('checked')


def test_text_field_has_placeholder_and_value():
    (text,) = inputs(render_field({'field': 'tracking_id', 'label_for': 'tracking_id'}, {'tracking_id': 'UA-1-1'}))
    assert text['type'] == 'text'
    assert text['placeholder'] == 'UA-XXXXXXXX-X'
    assert text['value'] == 'UA-1-1'
    assert text['name'] == 'google_analytics_settings[tracking_id]'


def test_text_field_without_value():
    (text,) = inputs(render_field({'field': 'tracking_id', 'label_for': 'tracking_id'}, None))
    assert not text.has_attr('value')


def test_text_value_is_escaped():
    markup = render_field({'field': 'tracking_id', 'label_for': 'tracking_id'}, {'tracking_id': '"><b>x'})
    assert '<b>' not in str(markup)
    (text,) = inputs(markup)
    assert text['value'] == '"><b>x'


def test_parse_last_value_wins():
    form = MultiDict([
        ('google_analytics_settings[enabled]', '0'),
        ('google_analytics_settings[enabled]', '1'),
        ('google_analytics_settings[force_ssl]', '0'),
        ('google_analytics_settings[tracking_id]', 'UA-1-1'),
        ('csrf', 'ignored'),
        ('other_settings[enabled]', '1'),
    ])
    assert parse_settings_form(form) == {'enabled': '1', 'force_ssl': '0', 'tracking_id': 'UA-1-1'}


def test_render_settings_form_creates_empty_record(app_context):
    assert not option_exists(OPTION_NAME)

    fields = render_settings_form()

    assert get_option(OPTION_NAME) == {}
    assert [spec.name for spec, _ in fields] == [spec.name for spec in FIELDS]


def test_render_settings_form_uses_stored_values(app_context):
    from services.options import update_option
    update_option(OPTION_NAME, {'enabled': 1, 'tracking_id': 'UA-2-2'})

    rendered = dict((spec.name, markup) for spec, markup in render_settings_form())

    assert inputs(rendered['enabled'])[1]['checked'] == 'checked'
    assert inputs(rendered['tracking_id'])[0]['value'] == 'UA-2-2'
    assert get_option(OPTION_NAME) == {'enabled': 1, 'tracking_id': 'UA-2-2'}
