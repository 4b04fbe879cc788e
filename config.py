"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

from constants.analytics import OPTION_NAME

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///analytics.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Password for the settings page
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin')

    # Analytics settings
    ANALYTICS_OPTION_NAME = OPTION_NAME
    # Optional callable applied to sanitized settings before they are saved
    ANALYTICS_SETTINGS_FILTER = None

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_PASSWORD = 'test-password'


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
