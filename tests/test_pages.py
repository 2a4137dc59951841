import pytest


def test_index_renders_page_shell(client):
    response = client.get("/")
    assert response.status_code == 200
    html = response.get_data(as_text=True)
    assert 'id="good-dog-btn"' in html
    assert 'id="bad-dog-btn"' in html
    assert 'id="popup-overlay"' in html
    assert 'src="/controller.js"' in html
    assert 'src="/script.js"' in html


def test_index_exposes_popup_mode(votes_path):
    from gooddogs import create_app
    from gooddogs import config

    app = create_app(config.TestingConfig, VOTES_LOG=str(votes_path), VOTE_POPUP_MODE="bad-only")
    html = app.test_client().get("/").get_data(as_text=True)
    assert 'data-popup-mode="bad-only"' in html


def test_security_headers(client):
    response = client.get("/")
    assert "default-src 'self'" in response.headers["Content-Security-Policy"]
    assert response.headers["X-Content-Type-Options"] == "nosniff"


@pytest.mark.parametrize("path,mimetype", [
    ("/script.js", "javascript"),
    ("/controller.js", "javascript"),
    ("/style.css", "css"),
])
def test_static_assets_served_from_root(client, path, mimetype):
    response = client.get(path)
    assert response.status_code == 200
    assert mimetype in response.mimetype
    response.close()


def test_missing_static_file_is_404(client):
    response = client.get("/dog42.jpg")
    assert response.status_code == 404
