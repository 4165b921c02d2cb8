"""
Database models for the home page, short links and site administrators.
"""

from datetime import datetime

from flask_login import UserMixin
from flask_sqlalchemy import SQLAlchemy
from werkzeug.security import check_password_hash, generate_password_hash

db = SQLAlchemy()


class Page(db.Model):
    """Singleton-per-locale home page record, keyed by locale."""
    __tablename__ = 'page'

    key = db.Column(db.String(64), primary_key=True)
    brand = db.Column(db.String(120), nullable=False, default='')
    title = db.Column(db.String(200), nullable=False, default='')
    # Trusted HTML, rendered as-is
    message = db.Column(db.Text, nullable=False, default='')

    def __repr__(self):
        return f'<Page {self.key!r}>'


class Link(db.Model):
    """Short link: a path segment redirecting to a target URL."""
    __tablename__ = 'link'

    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(2048), nullable=False)
    path = db.Column(db.String(255), nullable=False, index=True)
    name = db.Column(db.String(120), nullable=False, default='')

    def __repr__(self):
        return f'<Link /{self.path} -> {self.url}>'


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    is_admin = db.Column(db.Boolean, nullable=False, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    def set_password(self, password):
        """Set password hash"""
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        """Check password against hash"""
        return check_password_hash(self.password_hash, password)

    @classmethod
    def authenticate(cls, username: str, password: str):
        """Return the matching user, or None when the credentials are wrong."""
        user = cls.query.filter_by(username=username).first()
        if user and user.check_password(password):
            return user
        return None
