"""
Configuration management for the Flask application.
"""
import os
from pathlib import Path
from dotenv import load_dotenv

from cms.utils.validators import ALLOWED_EXTENSIONS

# Load environment variables from .env file
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).parent.parent


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.getenv('FLASK_SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = False
    TESTING = False

    # Document store
    DATA_PATH = BASE_DIR / os.getenv('CMS_DATA_PATH', 'data')
    CREDENTIALS_PATH = BASE_DIR / os.getenv('CMS_CREDENTIALS_PATH', 'users.yml')

    # Document naming rules
    ALLOWED_EXTENSIONS = ALLOWED_EXTENSIONS
    DUPLICATE_SUFFIX = 'copy'

    @staticmethod
    def validate_secret_key():
        """Validate that a real session secret is configured."""
        if not os.getenv('FLASK_SECRET_KEY'):
            raise ValueError(
                "FLASK_SECRET_KEY is not set. Sessions are signed with the "
                "development key. Please check your .env file."
            )


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    FLASK_ENV = 'development'


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    FLASK_ENV = 'production'


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    DATA_PATH = BASE_DIR / 'tests' / 'data'
    CREDENTIALS_PATH = BASE_DIR / 'tests' / 'users.yml'


# Configuration dictionary
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(config_name=None):
    """Get configuration based on environment."""
    if config_name is None:
        config_name = os.getenv('FLASK_ENV', 'development')
    return config.get(config_name, DevelopmentConfig)
