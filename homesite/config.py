import os


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-homesite")

    _basedir = os.path.abspath(os.path.dirname(__file__))

    # ------------------------------------------------------------------
    # Database configuration
    # ------------------------------------------------------------------
    # DATABASE_URL wins; otherwise MySQL when MYSQL_HOST is set, and a
    # local SQLite file for development.
    if os.environ.get("DATABASE_URL"):
        SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    elif os.environ.get("MYSQL_HOST"):
        MYSQL_USER = os.environ.get("MYSQL_USER", "homesite")
        MYSQL_PASSWORD = os.environ.get("MYSQL_PASSWORD", "")
        MYSQL_HOST = os.environ.get("MYSQL_HOST")
        MYSQL_DATABASE = os.environ.get("MYSQL_DATABASE", "homesite")
        SQLALCHEMY_DATABASE_URI = (
            f"mysql+pymysql://{MYSQL_USER}:{MYSQL_PASSWORD}@{MYSQL_HOST}/{MYSQL_DATABASE}"
        )
    else:
        SQLALCHEMY_DATABASE_URI = "sqlite:///" + os.path.join(_basedir, "homesite.db")

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Keep MySQL connections alive and test before use
    SQLALCHEMY_ENGINE_OPTIONS = {
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }

    # ------------------------------------------------------------------
    # Site behaviour
    # ------------------------------------------------------------------
    # "strict" answers failures with a 500, "lenient" bounces to the home page
    ERROR_POLICY = os.environ.get("HOMESITE_ERROR_POLICY", "strict")

    # Routing prefix stripped from short-link paths, e.g. "l/"
    LINK_PREFIX = os.environ.get("HOMESITE_LINK_PREFIX", "")

    # Page key used when the request carries no locale
    PAGE_DEFAULT_KEY = "page"


class DevelopmentConfig(Config):
    DEBUG = True


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret-key"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ERROR_POLICY = "strict"
    LINK_PREFIX = ""
