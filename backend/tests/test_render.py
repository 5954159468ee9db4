"""Tests for HTML rendering."""

from formgate.models.auth import LoginOutcome
from formgate.services.render import render_login_form, render_login_result


def test_render_success():
    html = render_login_result(LoginOutcome.SUCCESS)
    assert "Login Successful" in html
    assert "Login Failed" not in html


def test_render_failure():
    html = render_login_result(LoginOutcome.FAILED)
    assert "Login Failed" in html
    assert "Login Successful" not in html


def test_render_form_escapes_action():
    """Test the form action is autoescaped by the template environment."""
    html = render_login_form('/login"><script>')
    assert 'action="/login&#34;&gt;&lt;script&gt;"' in html
    assert '/login"><script>' not in html


def test_render_form_fields():
    html = render_login_form()
    assert 'action="/login"' in html
    assert '<label for="username">Username</label>' in html
    assert '<label for="password">Password</label>' in html
    assert 'type="password"' in html


def test_render_form_required_fields():
    """Both inputs are required and have a hidden "is required" message."""
    html = render_login_form()
    assert html.count(" required>") == 2
    assert '<p class="field-error" id="username-error" hidden>Username is required</p>' in html
    assert '<p class="field-error" id="password-error" hidden>Password is required</p>' in html


def test_render_form_submit_gating_script():
    """The page script keeps submit disabled until both fields have values."""
    html = render_login_form()
    assert '<button type="submit" id="login-submit">Submit</button>' in html
    assert "submit.disabled = !fields.every" in html
    assert 'addEventListener("submit"' in html
