"""
Flask application factory.
"""
from flask import Flask, session
import logging

__version__ = '1.0.0'


def create_app(config_name=None, overrides=None):
    """
    Create and configure Flask application.

    Args:
        config_name: Configuration name ('development', 'production', 'testing')
        overrides: Optional mapping applied on top of the configuration class

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    # Load configuration
    from cms.config import get_config
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.update(overrides)

    # Configure logging
    logging.basicConfig(
        level=logging.INFO if not app.config['DEBUG'] else logging.DEBUG,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Initialize stores
    from cms.services.document_store import init_document_store, DocumentPathError
    from cms.services.auth_service import init_credential_store
    store = init_document_store(app)
    credentials = init_credential_store(app)
    app.logger.info(f"Document store at {store.data_path}")
    app.logger.info(f"Credential file at {credentials.credentials_path}")

    # Warn about the development session key (don't fail)
    if not app.config['TESTING']:
        try:
            config_class.validate_secret_key()
        except ValueError as e:
            app.logger.warning(f"Session configuration warning: {e}")

    # Register blueprints
    from cms.routes import documents, users
    app.register_blueprint(users.bp)
    app.register_blueprint(documents.bp)

    # Error handlers
    @app.errorhandler(DocumentPathError)
    def invalid_document_name(error):
        app.logger.warning(f"Rejected document path: {error}")
        return {'error': str(error)}, 400

    @app.errorhandler(404)
    def not_found(error):
        return {'error': 'Not found'}, 404

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f"Internal error: {error}")
        return {'error': 'Internal server error'}, 500

    # Health check endpoint
    @app.route('/health')
    def health_check():
        return {
            'status': 'healthy',
            'app': 'Flat-file CMS',
            'version': __version__
        }, 200

    # Template context processors
    @app.context_processor
    def utility_processor():
        """Make utility functions available in templates."""
        from cms.utils.formatters import format_file_size, format_timestamp
        return {
            'format_file_size': format_file_size,
            'format_timestamp': format_timestamp,
            'current_user': session.get('username')
        }

    app.logger.info(f"Flask app created successfully in {app.config.get('FLASK_ENV', 'development')} mode")

    return app
