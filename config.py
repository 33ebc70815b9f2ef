"""Configuration module for Flask application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

BASE_DIR = os.path.abspath(os.path.dirname(__file__))


class Config:
    """Base configuration class."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', '1') == '1'
    ENV = os.getenv('FLASK_ENV', 'development')

    # Record store: json (default), memory or sql
    RECORD_STORE_BACKEND = os.getenv('RECORD_STORE_BACKEND', 'json').lower()
    DATA_DIR = os.getenv('DATA_DIR', os.path.join(BASE_DIR, 'data'))

    # Database (sql back end only)
    DATABASE_URL = os.getenv('DATABASE_URL') or f"sqlite:///{os.path.join(DATA_DIR, 'inventory.db')}"

    # SQLAlchemy
    SQLALCHEMY_DATABASE_URI = DATABASE_URL
    SQLALCHEMY_ECHO = os.getenv('SQLALCHEMY_ECHO', 'false').lower() == 'true'

    # Mock data written to a collection the first time it is loaded
    SEED_MOCK_DATA = os.getenv('SEED_MOCK_DATA', 'true').lower() == 'true'

    # Tables
    DEFAULT_PAGE_SIZE = int(os.getenv('DEFAULT_PAGE_SIZE', '5'))
    MAX_PAGE_SIZE = int(os.getenv('MAX_PAGE_SIZE', '100'))

    # Reports
    REPORT_TOP_LIMIT = int(os.getenv('REPORT_TOP_LIMIT', '5'))
    REPORT_RECENT_LIMIT = int(os.getenv('REPORT_RECENT_LIMIT', '5'))


class TestingConfig(Config):
    """Configuration used by the test suite: in-memory stores, seeded."""

    TESTING = True
    DEBUG = False
    RECORD_STORE_BACKEND = 'memory'
    SEED_MOCK_DATA = True
    DEFAULT_PAGE_SIZE = 5
    MAX_PAGE_SIZE = 100
    REPORT_TOP_LIMIT = 5
    REPORT_RECENT_LIMIT = 5
