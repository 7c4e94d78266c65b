#!/usr/bin/env python3
"""
================================================================================
WEB SERVER - Module Details Pages with Latest-Version Badge
================================================================================

Flask-based demo server rendering package details pages for the modules
listed in config.json. Every response passes through LatestVersionMiddleware,
which fills in the badge placeholders the templates leave behind.

Routes:
    GET /                          - List configured modules
    GET /<package_path>            - Details page at the module's latest version
    GET /<package_path>@<version>  - Details page at a specific version

Template Globals:
    latest_class_placeholder   - Token replaced with DetailsHeader-<label>
    latest_version_placeholder - Token replaced with the latest version

Usage:
    python -m version_badge.web.server
    python start_web_ui.py

    Access at: http://localhost:5000
================================================================================
"""

from flask import Flask, render_template, abort

from version_badge.utils.config import load_config
from version_badge.utils.constants import LATEST_CLASS_PLACEHOLDER, LATEST_VERSION_PLACEHOLDER
from version_badge.utils.logger import setup_logging, logger
from version_badge.web.middleware import latest_version
from version_badge.web.resolver import ConfigResolver


def create_app(config=None):
    """
    Build the Flask app with the badge middleware installed

    Args:
        config: Configuration dict (loaded from config.json when omitted)

    Returns:
        Flask: Configured application
    """
    if config is None:
        config = load_config()

    app = Flask(__name__)
    app.config['MODULES'] = config.get('modules', {})

    resolver = ConfigResolver(app.config['MODULES'])
    app.wsgi_app = latest_version(resolver)(app.wsgi_app)

    @app.context_processor
    def inject_placeholders():
        """Inject badge placeholders into templates"""
        return dict(
            latest_class_placeholder=LATEST_CLASS_PLACEHOLDER,
            latest_version_placeholder=LATEST_VERSION_PLACEHOLDER,
        )

    @app.route('/')
    def index():
        modules = sorted(app.config['MODULES'])
        return render_template('index.html', modules=modules)

    @app.route('/<path:path>')
    def details(path):
        package_path, _, version = path.partition('@')

        module_path = resolver.find_module(package_path)
        if module_path is None:
            abort(404)

        info = app.config['MODULES'][module_path]
        if not version:
            version = info.get('latest') or ''
            if not version:
                abort(404)

        versions = info.get('versions')
        if versions and version not in versions:
            abort(404)

        return render_template(
            'details.html',
            version=version,
            module_path=module_path,
            package_path=package_path,
        )

    return app


def main():
    """Start the web server"""
    config = load_config()
    setup_logging(config['logging'].get('context', 'web'))

    app = create_app(config)

    host = config['server']['host']
    port = config['server']['port']
    logger.info(f"Starting HTTP server at http://{host}:{port}")
    app.run(host=host, port=port, debug=config['server'].get('debug', False))


if __name__ == '__main__':
    main()
