"""
Tracking Script Service

Decides whether the Google Analytics snippet should be emitted for the
current viewer and builds the snippet text.
"""

from collections.abc import Mapping

from markupsafe import Markup

from constants.analytics import GA_LOADER, SCRIPT_ID


class RenderContext:
    """Identifiers of the scripts already emitted during one render cycle."""

    def __init__(self):
        self.done = set()

    def is_done(self, script_id):
        return script_id in self.done

    def mark_done(self, script_id):
        self.done.add(script_id)


def _flag(settings, key):
    value = settings.get(key)
    return bool(value) and value != '0'


def suppression_reason(settings, viewer_is_admin):
    """
    Return why the snippet must not be emitted, or None if it may be.
    """
    if not isinstance(settings, Mapping):
        return 'no settings stored'
    if not _flag(settings, 'enabled'):
        return 'tracking disabled'
    if not _flag(settings, 'tracking_id'):
        return 'no tracking id'
    if not _flag(settings, 'track_admin') and viewer_is_admin:
        return 'admin viewer excluded'
    return None


def should_emit(settings, viewer_is_admin):
    """Return True if the tracking snippet should be added to the page."""
    return suppression_reason(settings, viewer_is_admin) is None


def js_string(value):
    """Quote value as a single-quoted JavaScript string literal."""
    value = str(value)
    value = value.replace('\\', '\\\\').replace("'", "\\'")
    value = value.replace('<', '\\x3c').replace('\n', '\\n').replace('\r', '\\r')
    return "'" + value + "'"


def build_script(settings):
    """
    Build the body of the tracking script.

    The loader comes first, then the create call, the optional forceSSL and
    anonymizeIp calls, and finally the pageview.
    """
    lines = [
        GA_LOADER,
        "ga('create', %s, 'auto');" % js_string(settings.get('tracking_id', '')),
    ]

    if _flag(settings, 'force_ssl'):
        lines.append("ga('set', 'forceSSL', true);")

    if _flag(settings, 'anonymize_ip'):
        lines.append("ga('set', 'anonymizeIp', true);")

    lines.append("ga('send', 'pageview');")
    return '\n'.join(lines)


def render_tracking_script(context, settings, viewer_is_admin):
    """
    Return the <script> block for this render cycle.

    Empty markup is returned when tracking is off for this viewer or the
    block was already emitted through the same context.
    """
    if not should_emit(settings, viewer_is_admin):
        return Markup('')

    if context.is_done(SCRIPT_ID):
        return Markup('')

    script = Markup('<script type="text/javascript">\n' + build_script(settings) + '\n</script>')
    context.mark_done(SCRIPT_ID)
    return script
