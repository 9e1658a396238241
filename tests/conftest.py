"""
Pytest fixtures for the catalog header layout service.

No database or network: the engine is pure and the HTTP surfaces are
exercised through Flask's test client.
"""
import io
import os
import sys

import pytest
from PIL import Image

# Set test environment before importing app
os.environ['FLASK_ENV'] = 'testing'
os.environ['APP_STAGE'] = 'test'
os.environ['SECRET_KEY'] = 'test-secret-key'
os.environ.pop('EXPORT_PAGE_SIZE', None)
os.environ.pop('EXPORT_CSS_DPI', None)

PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(scope='session')
def app():
    """Create application for testing."""
    from app import app as flask_app
    flask_app.config['TESTING'] = True
    return flask_app


@pytest.fixture(scope='function')
def client(app):
    """Create a test client for the app."""
    return app.test_client()


@pytest.fixture
def header_settings():
    """Catalog header settings as stored on a catalog row."""
    return {
        'logo_position': 'header-left',
        'logo_size': 'medium',
        'title_position': 'left',
        'catalog_name': 'Spring Collection',
        'primary_color': '#4f46e5',
        'logo_url': 'https://cdn.example.com/logo.png',
    }


def make_png(width=200, height=100, color="red"):
    """Create a simple colored PNG."""
    img = Image.new('RGBA', (width, height), color)
    out = io.BytesIO()
    img.save(out, format='PNG')
    return out.getvalue()


@pytest.fixture
def png_factory():
    return make_png
