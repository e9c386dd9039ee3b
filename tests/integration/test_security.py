"""
Integration Tests for Security Features

Tests security headers and rate limiting setup.
"""


class TestSecurityHeaders:
    """Test HTTP security headers on all responses."""

    def test_x_content_type_options(self, client):
        """Test: X-Content-Type-Options header is set."""
        response = client.get('/')
        assert response.headers.get('X-Content-Type-Options') == 'nosniff'

    def test_x_frame_options(self, client):
        """Test: X-Frame-Options header is set."""
        response = client.get('/')
        assert response.headers.get('X-Frame-Options') == 'SAMEORIGIN'

    def test_content_security_policy(self, client):
        """Test: Content-Security-Policy header is set."""
        csp = client.get('/').headers.get('Content-Security-Policy')

        assert csp is not None
        assert 'default-src' in csp
        assert "'self'" in csp

    def test_post_images_allowed(self, client):
        """Test: CSP lets post content load images over HTTPS."""
        csp = client.get('/').headers.get('Content-Security-Policy')
        assert 'img-src' in csp and 'https:' in csp

    def test_scripts_same_origin_only(self, client):
        """Test: Scripts may only load from the site itself."""
        csp = client.get('/').headers.get('Content-Security-Policy')
        directives = dict(d.strip().split(' ', 1) for d in csp.split(';'))
        assert directives['script-src'] == "'self'"

    def test_referrer_policy(self, client):
        """Test: Referrer-Policy header is set."""
        response = client.get('/')
        assert response.headers.get('Referrer-Policy') == 'strict-origin-when-cross-origin'

    def test_no_hsts_over_http(self, client):
        """Test: HSTS is only sent on HTTPS requests."""
        assert 'Strict-Transport-Security' not in client.get('/').headers

    def test_hsts_over_https(self, client):
        """Test: HSTS is sent on HTTPS requests."""
        response = client.get('/', base_url='https://localhost')
        assert 'max-age=31536000' in response.headers.get('Strict-Transport-Security')

    def test_headers_on_all_routes(self, client, make_post):
        """Test: Security headers apply to all routes, including 404s."""
        make_post(slug='hello')

        for route in ['/', '/blog', '/blog/hello', '/blog/missing']:
            response = client.get(route)
            assert response.headers.get('X-Content-Type-Options') == 'nosniff'
            assert response.headers.get('X-Frame-Options') == 'SAMEORIGIN'


class TestRateLimiting:
    """Test rate limiting on the post detail route."""

    def test_limiter_off_in_testing(self, app):
        """Test: Testing config switches rate limiting off."""
        assert app.config['RATELIMIT_ENABLED'] is False

    def test_limit_not_enforced_when_disabled(self, tmp_path):
        """Test: With limiting off, the detail route never returns 429."""
        from app import create_app
        from config import TestingConfig
        from extensions import db

        class UnlimitedConfig(TestingConfig):
            SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'unlimited.db'}"
            BLOG_DETAIL_RATE_LIMIT = '1 per minute'

        app = create_app(UnlimitedConfig)
        client = app.test_client()
        with app.app_context():
            db.create_all()

        statuses = [client.get('/blog/missing').status_code for _ in range(3)]

        assert statuses == [404, 404, 404]
        app.extensions['view_counter'].shutdown()

    def test_detail_limit_configured(self, app):
        """Test: Detail route limit comes from config."""
        assert app.config['BLOG_DETAIL_RATE_LIMIT'] == '120 per minute'

    def test_limit_enforced_when_enabled(self, tmp_path):
        """Test: Exceeding the detail limit returns 429."""
        from app import create_app
        from config import TestingConfig
        from extensions import db

        class LimitedConfig(TestingConfig):
            SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'limited.db'}"
            RATELIMIT_ENABLED = True
            BLOG_DETAIL_RATE_LIMIT = '2 per minute'

        app = create_app(LimitedConfig)
        client = app.test_client()
        with app.app_context():
            db.create_all()

        statuses = [client.get('/blog/missing').status_code for _ in range(3)]

        assert statuses == [404, 404, 429]
        app.extensions['view_counter'].shutdown()
