from collections.abc import Mapping
from functools import wraps
import hmac
import secrets

from flask import Blueprint, Flask, current_app, flash, g, redirect, render_template, request, session, url_for
from flask_migrate import Migrate
from markupsafe import Markup
from sqlalchemy.exc import SQLAlchemyError

from config import get_config
from models import db
from services import (
    RenderContext, get_option, parse_settings_form, render_settings_form,
    render_tracking_script, sanitize_settings, suppression_reason, update_option
)

bp = Blueprint('main', __name__)
migrate = Migrate()

# ============================================
# HELPERS
# ============================================

def viewer_is_admin():
    """True if the current session belongs to a logged-in administrator."""
    return bool(session.get('is_admin'))


def admin_required(view):
    @wraps(view)
    def wrapped(*args, **kwargs):
        if not viewer_is_admin():
            flash('Please log in to manage settings', 'warning')
            return redirect(url_for('main.admin_login', next=request.path))
        return view(*args, **kwargs)
    return wrapped


def csrf_token():
    """Return the form token of the current session, creating it on first use."""
    if 'csrf_token' not in session:
        session['csrf_token'] = secrets.token_urlsafe(32)
    return session['csrf_token']


def csrf_token_valid():
    """True if the submitted form carries the token of the current session."""
    expected = session.get('csrf_token')
    submitted = request.form.get('csrf_token', '')
    if not expected or not submitted:
        return False
    return hmac.compare_digest(submitted.encode('utf-8'), expected.encode('utf-8'))


def get_render_context():
    """Return the render context of the current request, creating it on first use."""
    if 'render_context' not in g:
        g.render_context = RenderContext()
    return g.render_context


def analytics_head():
    """Render hook called from the <head> of every page."""
    try:
        settings = get_option(current_app.config['ANALYTICS_OPTION_NAME'])
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception('Could not load analytics settings')
        return Markup('')

    is_admin = viewer_is_admin()
    reason = suppression_reason(settings, is_admin)
    if reason:
        current_app.logger.debug('Analytics script suppressed: %s', reason)
    return render_tracking_script(get_render_context(), settings, is_admin)

# ============================================
# ROUTES - HOME
# ============================================

@bp.route('/')
def index():
    return render_template('index.html')

# ============================================
# ROUTES - ADMIN
# ============================================

@bp.route('/admin/login', methods=['GET', 'POST'])
def admin_login():
    next_url = request.values.get('next', '')
    # Only follow local redirects
    if not next_url.startswith('/') or next_url.startswith('//'):
        next_url = url_for('main.admin_settings')

    if request.method == 'POST':
        password = request.form.get('password', '')
        expected = current_app.config['ADMIN_PASSWORD']
        if expected and hmac.compare_digest(password.encode('utf-8'), expected.encode('utf-8')):
            session['is_admin'] = True
            flash('Logged in', 'success')
            return redirect(next_url)

        current_app.logger.warning('Failed admin login from %s', request.remote_addr)
        flash('Invalid password', 'danger')

    return render_template('admin_login.html', next_url=next_url)


@bp.route('/admin/logout', methods=['POST'])
def admin_logout():
    if not csrf_token_valid():
        current_app.logger.warning('Rejected logout without a valid form token from %s', request.remote_addr)
        flash('Invalid or missing form token', 'danger')
        return redirect(url_for('main.index'))

    session.pop('is_admin', None)
    flash('Logged out', 'info')
    return redirect(url_for('main.index'))


@bp.route('/admin/analytics', methods=['GET', 'POST'])
@admin_required
def admin_settings():
    option_name = current_app.config['ANALYTICS_OPTION_NAME']

    if request.method == 'POST':
        if not csrf_token_valid():
            current_app.logger.warning('Rejected settings form without a valid form token from %s', request.remote_addr)
            flash('Invalid or missing form token. Settings were not saved.', 'danger')
            return redirect(url_for('main.admin_settings'))

        raw_input = parse_settings_form(request.form, option_name)
        settings = sanitize_settings(raw_input, current_app.config.get('ANALYTICS_SETTINGS_FILTER'))
        update_option(option_name, settings)
        if isinstance(settings, Mapping):
            current_app.logger.info(
                'Analytics settings saved: enabled=%s tracking_id=%r force_ssl=%s anonymize_ip=%s track_admin=%s',
                settings.get('enabled'), settings.get('tracking_id'), settings.get('force_ssl'),
                settings.get('anonymize_ip'), settings.get('track_admin')
            )
        else:
            current_app.logger.info('Analytics settings saved: %r', settings)
        flash('Settings saved.', 'success')
        return redirect(url_for('main.admin_settings'))

    fields = render_settings_form(option_name)
    return render_template('admin_settings.html', fields=fields)

# ============================================
# APPLICATION
# ============================================

def create_app(config_name=None):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.logger.setLevel(app.config['LOG_LEVEL'])

    db.init_app(app)
    migrate.init_app(app, db)
    app.register_blueprint(bp)

    @app.context_processor
    def inject_analytics():
        return {'analytics_head': analytics_head, 'csrf_token': csrf_token}

    return app


def init_db(app):
    with app.app_context():
        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=5000, use_reloader=False)
