"""
Sign-in and sign-out pages for site administrators
"""

from flask import Blueprint, flash, redirect, render_template, request
from flask_login import login_user, logout_user

from ..models import User
from .identity import current_user, is_safe_next

bp = Blueprint('auth', __name__)


def _next_page():
    target = request.values.get('next', '')
    return target if is_safe_next(target) else '/'


@bp.route('/sign-in', methods=['GET', 'POST'])
def sign_in():
    """Administrator login"""
    if current_user() is not None:
        return redirect(_next_page())

    if request.method == 'POST':
        username = request.form.get('username')
        password = request.form.get('password')

        if not username or not password:
            flash('Please enter both username and password.', 'error')
            return render_template('auth/sign_in.html', next=_next_page()), 400

        user = User.authenticate(username, password)
        if user:
            login_user(user, remember=bool(request.form.get('remember')))
            return redirect(_next_page())

        flash('Invalid username or password.', 'error')
        return render_template('auth/sign_in.html', next=_next_page()), 401

    return render_template('auth/sign_in.html', next=_next_page())


@bp.route('/sign-out')
def sign_out():
    logout_user()
    return redirect(_next_page())
