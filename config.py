"""
Flask Configuration Settings
"""
import os
from datetime import timedelta
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

def validate_required_config(flask_env):
    """
    Validate that required configuration variables are set.
    Raises ValueError if critical variables are missing in production.
    Returns validation report.
    """
    required_in_production = [
        'SECRET_KEY',
        'JWT_SECRET_KEY',
        'MYSQL_USER',
        'MYSQL_PASSWORD',
        'MYSQL_HOST',
        'MYSQL_DATABASE'
    ]

    recommended_vars = [
        'CORS_ORIGINS',
    ]

    missing_required = [var for var in required_in_production if not os.environ.get(var)]
    missing_recommended = [var for var in recommended_vars if not os.environ.get(var)]

    # DATABASE_URL replaces the individual MySQL settings
    if os.environ.get('DATABASE_URL'):
        missing_required = [var for var in missing_required if not var.startswith('MYSQL_')]

    if missing_required and flask_env == 'production':
        raise ValueError(
            f"Missing required environment variables for production: {', '.join(missing_required)}. "
            f"Please set these in your .env file or environment."
        )

    if (missing_required or missing_recommended) and flask_env == 'development':
        import warnings
        if missing_required:
            warnings.warn(
                f"Missing recommended environment variables: {', '.join(missing_required)}. "
                f"Using defaults for development only.",
                UserWarning
            )
        if missing_recommended:
            warnings.warn(
                f"Missing optional environment variables: {', '.join(missing_recommended)}. "
                f"Some features may not work correctly.",
                UserWarning
            )

    return {
        'required_missing': missing_required,
        'recommended_missing': missing_recommended,
        'is_valid': len(missing_required) == 0 if flask_env == 'production' else True
    }

class Config:
    """Base configuration class."""

    FLASK_ENV = os.environ.get('FLASK_ENV') or 'development'

    validate_required_config(FLASK_ENV)

    # SECRET_KEY - Required in production, allow default only in development/testing
    _secret_key = os.environ.get('SECRET_KEY')
    if not _secret_key:
        if FLASK_ENV == 'production':
            raise ValueError("SECRET_KEY must be set in production environment")
        _secret_key = 'dev-secret-key-change-in-production'
    SECRET_KEY = _secret_key

    # Database Configuration
    _db_url = os.environ.get('DATABASE_URL')
    if not _db_url:
        db_user = os.environ.get('MYSQL_USER', 'root')
        db_password = os.environ.get('MYSQL_PASSWORD', 'password')
        db_host = os.environ.get('MYSQL_HOST', 'localhost')
        db_port = os.environ.get('MYSQL_PORT', '3306')
        db_name = os.environ.get('MYSQL_DATABASE', 'taskboard')
        _db_url = f"mysql+pymysql://{db_user}:{db_password}@{db_host}:{db_port}/{db_name}"
    SQLALCHEMY_DATABASE_URI = _db_url

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_timeout': 20,
        'max_overflow': 0,
    }

    # JWT Configuration - tokens are issued by the identity service, only verified here
    _jwt_secret = os.environ.get('JWT_SECRET_KEY')
    if not _jwt_secret:
        if FLASK_ENV == 'production':
            raise ValueError("JWT_SECRET_KEY must be set in production environment")
        _jwt_secret = 'jwt-secret-change-in-production'
    JWT_SECRET_KEY = _jwt_secret
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=int(os.environ.get('JWT_ACCESS_TOKEN_EXPIRES', 3600)))
    JWT_TOKEN_LOCATION = ['headers']

    # Rate Limiting
    RATELIMIT_STORAGE_URI = os.environ.get('RATE_LIMIT_STORAGE_URL', 'memory://')
    RATELIMIT_DEFAULT = "300 per hour"
    RATELIMIT_ENABLED = True

    MAX_CONTENT_LENGTH = int(os.environ.get('MAX_CONTENT_LENGTH', 1048576))  # 1MB

    # CORS Configuration - Environment-based origins
    # Format: comma-separated list of origins, e.g., "https://app.example.com,https://www.example.com"
    _cors_origins_env = os.environ.get('CORS_ORIGINS')
    if _cors_origins_env:
        CORS_ORIGINS = [origin.strip() for origin in _cors_origins_env.split(',') if origin.strip()]
    else:
        if FLASK_ENV == 'production':
            raise ValueError(
                "CORS_ORIGINS must be set in production environment. "
                "Set it as a comma-separated list of allowed origins."
            )
        CORS_ORIGINS = [
            'http://localhost:3000',
            'http://127.0.0.1:3000',
        ]

class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    FLASK_ENV = 'development'
    SQLALCHEMY_ECHO = True  # Log SQL queries in development

class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    FLASK_ENV = 'production'

    SESSION_COOKIE_SECURE = True
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    RATELIMIT_DEFAULT = "120 per hour"

class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    FLASK_ENV = 'testing'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # In-memory SQLite runs on a StaticPool, which rejects the pool sizing options
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SQLALCHEMY_ECHO = False
    JWT_SECRET_KEY = 'testing-jwt-secret-key-with-enough-length'
    RATELIMIT_ENABLED = False

# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
