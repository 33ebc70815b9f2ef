"""Flask application factory."""
import os

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException


def create_app(config_object='config.Config'):
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_object)

    # Initialize Sentry for error tracking in production
    if os.getenv('SENTRY_DSN') and (app.config.get('ENV') == 'production' or os.getenv('FLASK_ENV') == 'production'):
        import sentry_sdk
        from sentry_sdk.integrations.flask import FlaskIntegration

        sentry_sdk.init(
            dsn=os.getenv('SENTRY_DSN'),
            integrations=[FlaskIntegration()],
            traces_sample_rate=0.1,
            environment=os.getenv('FLASK_ENV', 'production'),
            release=os.getenv('GIT_COMMIT', 'unknown')
        )

    # Record stores (memory / json / sql)
    from inventory_dashboard.record_store import init_record_stores
    init_record_stores(app)

    # Error Handlers
    from inventory_dashboard.exceptions import DashboardError

    @app.errorhandler(DashboardError)
    def handle_dashboard_error(error):
        """Handle application exceptions as JSON."""
        if error.status_code >= 500:
            app.logger.error(f"DashboardError [{error.status_code}]: {error.message}")
        else:
            app.logger.warning(f"DashboardError [{error.status_code}]: {error.message}")
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'status': 'error', 'message': error.description or error.name}), error.code

    @app.errorhandler(500)
    @app.errorhandler(Exception)
    def internal_error(error):
        app.logger.error(f"Unhandled Exception: {error}", exc_info=True)
        return jsonify({'status': 'error', 'message': 'Internal Server Error'}), 500

    # Register blueprints
    from inventory_dashboard.blueprints.main import main_bp
    from inventory_dashboard.blueprints.records import records_bp
    from inventory_dashboard.blueprints.documents import documents_bp
    from inventory_dashboard.blueprints.reports import reports_bp
    from inventory_dashboard.blueprints.settings import settings_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(records_bp)
    app.register_blueprint(documents_bp)
    app.register_blueprint(reports_bp)
    app.register_blueprint(settings_bp)

    # Register CLI commands
    from inventory_dashboard.cli_commands import init_cli_commands
    init_cli_commands(app)

    return app
