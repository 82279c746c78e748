"""
Health check endpoints for monitoring and system status
"""
from flask import Blueprint, jsonify, current_app
from sqlalchemy import text

from taskboard import db
from taskboard.models.timestamps import utcnow

health_bp = Blueprint('health', __name__)

SERVICE_NAME = 'taskboard-project-tasks'


@health_bp.route('/health', methods=['GET'])
@health_bp.route('/health/liveness', methods=['GET'])
def health_check():
    """
    Basic liveness probe - indicates if the application is running.
    ---
    tags:
      - Health
    summary: Liveness probe
    security: []
    responses:
      200:
        description: Application is alive
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': utcnow().isoformat() + 'Z',
        'service': SERVICE_NAME
    }), 200


@health_bp.route('/health/readiness', methods=['GET'])
def readiness_check():
    """
    Readiness probe - checks database connectivity.
    ---
    tags:
      - Health
    summary: Readiness probe
    security: []
    responses:
      200:
        description: Application is ready
      503:
        description: Application is not ready
    """
    try:
        db.session.execute(text('SELECT 1'))
        db.session.commit()

        return jsonify({
            'status': 'ready',
            'timestamp': utcnow().isoformat() + 'Z',
            'checks': {
                'database': 'connected'
            }
        }), 200
    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f'Readiness check failed: {str(e)}')
        return jsonify({
            'status': 'not_ready',
            'timestamp': utcnow().isoformat() + 'Z',
            'checks': {
                'database': 'disconnected'
            },
            'error': str(e) if current_app.config.get('DEBUG') else 'Database connection failed'
        }), 503
