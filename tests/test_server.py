"""Tests for the demo server with the badge middleware installed"""
import unittest
from unittest.mock import patch

from version_badge.web.middleware import LatestVersionMiddleware
from version_badge.web.server import create_app, main


MODULES = {
    "example.com/mod": {
        "latest": "v1.2.0",
        "versions": ["v1.0.0", "v1.1.0", "v1.2.0"],
        "packages": ["example.com/mod", "example.com/mod/pkg"],
    },
    "example.com/mod/v2": {
        "latest": "",
        "versions": ["v2.0.0"],
    },
}


class TestDetailsPages(unittest.TestCase):
    """Rendered pages come out with the badge filled in"""

    def setUp(self):
        self.app = create_app({'modules': MODULES})
        self.app.config['TESTING'] = True
        self.client = self.app.test_client()

    def test_middleware_installed(self):
        self.assertIsInstance(self.app.wsgi_app, LatestVersionMiddleware)

    def test_latest_version_page(self):
        response = self.client.get('/example.com/mod/pkg@v1.2.0')

        self.assertEqual(response.status_code, 200)
        html = response.get_data(as_text=True)
        self.assertIn('data-version="v1.2.0" data-mpath="example.com/mod" data-ppath="example.com/mod/pkg"', html)
        self.assertIn('DetailsHeader-badge DetailsHeader-latest', html)
        self.assertIn('href="/example.com/mod/pkg@v1.2.0"', html)
        self.assertNotIn('$$GODISCOVERY', html)

    def test_older_version_page(self):
        response = self.client.get('/example.com/mod/pkg@v1.0.0')

        html = response.get_data(as_text=True)
        self.assertIn('DetailsHeader-badge DetailsHeader-goToLatest', html)
        self.assertIn('href="/example.com/mod/pkg@v1.2.0"', html)

    def test_unversioned_path_shows_latest(self):
        response = self.client.get('/example.com/mod')

        html = response.get_data(as_text=True)
        self.assertIn('data-version="v1.2.0"', html)
        self.assertIn('DetailsHeader-latest', html)

    def test_unknown_latest_version(self):
        response = self.client.get('/example.com/mod/v2@v2.0.0')

        html = response.get_data(as_text=True)
        self.assertIn('data-mpath="example.com/mod/v2"', html)
        self.assertIn('DetailsHeader-badge DetailsHeader-unknown', html)
        self.assertIn('href="/example.com/mod/v2@"', html)

    def test_package_not_listed_in_module_is_unknown(self):
        response = self.client.get('/example.com/mod/other@v1.2.0')

        self.assertEqual(response.status_code, 200)
        self.assertIn('DetailsHeader-unknown', response.get_data(as_text=True))

    def test_content_length_matches_rewritten_body(self):
        response = self.client.get('/example.com/mod/pkg@v1.0.0')
        self.assertEqual(int(response.headers['Content-Length']), len(response.get_data()))

    def test_unknown_module_is_404(self):
        response = self.client.get('/example.org/nothing')
        self.assertEqual(response.status_code, 404)

    def test_unknown_version_is_404(self):
        response = self.client.get('/example.com/mod/pkg@v9.9.9')
        self.assertEqual(response.status_code, 404)

    def test_module_without_latest_needs_explicit_version(self):
        response = self.client.get('/example.com/mod/v2')
        self.assertEqual(response.status_code, 404)

    def test_index_passes_through_unchanged(self):
        with patch('version_badge.web.resolver.ConfigResolver.__call__') as resolver:
            response = self.client.get('/')

        self.assertEqual(response.status_code, 200)
        html = response.get_data(as_text=True)
        self.assertIn('href="/example.com/mod"', html)
        self.assertIn('href="/example.com/mod/v2"', html)
        resolver.assert_not_called()

    def test_non_string_latest_renders_unknown(self):
        client = create_app({'modules': {'m': {'latest': 1.2}}}).test_client()

        response = client.get('/m@v1')

        self.assertEqual(response.status_code, 200)
        html = response.get_data(as_text=True)
        self.assertIn('DetailsHeader-badge DetailsHeader-unknown', html)
        self.assertIn('href="/m@"', html)

    def test_head_omits_unverifiable_content_length(self):
        response = self.client.head('/example.com/mod/pkg@v1.0.0')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(), b'')
        self.assertNotIn('Content-Length', response.headers)

    def test_empty_module_table(self):
        client = create_app({'modules': {}}).test_client()
        response = client.get('/')
        self.assertIn('No modules configured', response.get_data(as_text=True))


class TestCreateAppDefaults(unittest.TestCase):
    """App factory with config loaded from disk"""

    def test_loads_config_when_not_given(self):
        with patch('version_badge.web.server.load_config', return_value={'modules': MODULES}) as loader:
            app = create_app()

        loader.assert_called_once_with()
        self.assertEqual(app.config['MODULES'], MODULES)


class TestMain(unittest.TestCase):
    """Launcher wiring"""

    def test_main_runs_configured_server(self):
        config = {
            'server': {'host': '0.0.0.0', 'port': 8081, 'debug': False},
            'logging': {'context': 'test'},
            'modules': MODULES,
        }
        with patch('version_badge.web.server.load_config', return_value=config), \
             patch('version_badge.web.server.setup_logging') as setup_logging, \
             patch('flask.Flask.run') as run:
            main()

        setup_logging.assert_called_once_with('test')
        run.assert_called_once_with(host='0.0.0.0', port=8081, debug=False)


if __name__ == '__main__':
    unittest.main()
