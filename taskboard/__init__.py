"""
Flask Application Factory
"""
import os
import re
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_jwt_extended import JWTManager
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flasgger import Swagger

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
cors = CORS()
jwt = JWTManager()
limiter = Limiter(key_func=get_remote_address)

def create_app(config_name=None):
    """
    Create and configure the Flask application.

    Args:
        config_name (str): Configuration environment name

    Returns:
        Flask: Configured Flask application instance
    """
    app = Flask(__name__)

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    from config import config
    app.config.from_object(config.get(config_name, config['default']))

    db.init_app(app)
    migrate.init_app(app, db)

    cors.init_app(app, **build_cors_config(app))
    jwt.init_app(app)
    limiter.init_app(app)

    # Models must be imported before create_all/migrations can see them
    from taskboard import models  # noqa: F401

    register_blueprints(app)
    register_error_handlers(app)

    from taskboard.middleware import init_request_logging
    init_request_logging(app)

    from taskboard.events import init_event_listeners
    init_event_listeners(app)

    register_swagger(app)

    return app

def build_cors_config(app):
    """Build Flask-CORS settings scoped to the /api routes."""
    cors_origins = []
    for origin in app.config.get('CORS_ORIGINS', []):
        if not origin.startswith(('http://', 'https://')):
            app.logger.warning(f"Invalid CORS origin format (must start with http:// or https://): {origin}")
            continue
        if '*' in origin:
            # Only allow wildcards in development
            if app.config.get('FLASK_ENV') != 'development':
                app.logger.warning(f"Wildcard CORS origins only allowed in development: {origin}")
                continue
            pattern = re.escape(origin).replace(r'\*', r'.*')
            cors_origins.append(re.compile(f"^{pattern}$"))
        else:
            cors_origins.append(origin)

    if not cors_origins:
        app.logger.warning("No CORS origins configured. Cross-origin requests will be rejected.")

    return {
        "supports_credentials": True,
        "resources": {
            r"/api/*": {
                "origins": cors_origins,
                "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                "allow_headers": ["Content-Type", "Authorization", "X-Requested-With", "Accept", "Origin"],
                "expose_headers": ["Content-Type", "Authorization", "X-Request-ID"],
                "max_age": 3600,
            }
        },
    }

def register_blueprints(app):
    """Register application blueprints."""
    from taskboard.controllers.tasks_controller import tasks_bp
    from taskboard.routes.health import health_bp

    app.register_blueprint(tasks_bp, url_prefix='/api/projects/<int:project_id>/tasks')
    app.register_blueprint(health_bp, url_prefix='/api')

    app.logger.info(f"Rate limiting enabled: {app.config.get('RATELIMIT_DEFAULT')}")

def register_error_handlers(app):
    """Register application error handlers."""
    from taskboard.utils.error_handlers import register_error_handlers as register_handlers
    register_handlers(app)

def register_swagger(app):
    """Serve the OpenAPI documentation for the /api routes."""
    swagger_template = {
        "swagger": "2.0",
        "info": {
            "title": "Taskboard Project Tasks API",
            "description": "Project-scoped task resources.\n\n"
                           "## Authentication\n"
                           "Every task endpoint requires a JWT bearer token issued by the identity service:\n"
                           "```\n"
                           "Authorization: Bearer <your-access-token>\n"
                           "```\n"
                           "The caller must also be an active participant of the project in the path.\n\n"
                           "## Response Format\n"
                           "- **Success**: `{success: true, data: {...}, error: null}`\n"
                           "- **Error**: `{success: false, data: null, error: {message, code, status_code}}`\n",
            "version": "1.0.0",
        },
        "basePath": "/",
        "schemes": ["http", "https"],
        "consumes": ["application/json"],
        "produces": ["application/json"],
        "securityDefinitions": {
            "Bearer": {
                "type": "apiKey",
                "name": "Authorization",
                "in": "header",
                "description": "JWT Authorization header using the Bearer scheme. Example: \"Authorization: Bearer {token}\""
            }
        },
        "security": [{"Bearer": []}],
        "definitions": {
            "ErrorResponse": {
                "type": "object",
                "properties": {
                    "success": {"type": "boolean", "example": False},
                    "data": {"type": "null"},
                    "error": {
                        "type": "object",
                        "properties": {
                            "message": {"type": "string", "example": "Task not found"},
                            "code": {"type": "string", "example": "not_found"},
                            "status_code": {"type": "integer", "example": 404}
                        }
                    }
                }
            },
            "Task": {
                "type": "object",
                "properties": {
                    "id": {"type": "integer"},
                    "title": {"type": "string"},
                    "description": {"type": "string"},
                    "start": {"type": "string", "format": "date-time"},
                    "end": {"type": "string", "format": "date-time"},
                    "project_id": {"type": "integer"},
                    "creator": {"type": "object"},
                    "participants": {"type": "array", "items": {"type": "object"}},
                    "created_at": {"type": "string", "format": "date-time"},
                    "updated_at": {"type": "string", "format": "date-time"},
                    "version": {"type": "integer"}
                }
            }
        }
    }

    swagger_config = {
        "headers": [],
        "specs": [
            {
                "endpoint": "apispec_main",
                "route": "/api/swagger.json",
                "rule_filter": lambda rule: rule.rule.startswith("/api/"),
                "model_filter": lambda tag: True,
            }
        ],
        "static_url_path": "/flasgger_static",
        "swagger_ui": True,
        "specs_route": "/api/docs/",
    }

    Swagger(app, template=swagger_template, config=swagger_config)
