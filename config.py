import os

basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    # No sessions are used; kept so Flask extensions that expect it stay quiet
    SECRET_KEY = os.environ.get('SECRET_KEY')

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', f"sqlite:///{os.path.join(basedir, 'data', 'app.db')}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Logging: stdout by default, logs/app.log when LOG_TO_FILE=1
    LOG_TO_FILE = os.environ.get('LOG_TO_FILE') == '1'
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'WARNING'
