import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///certifyme.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    # Run db.create_all() on startup (dev convenience; use Flask-Migrate otherwise)
    CREATE_TABLES = os.getenv("CREATE_TABLES", "0") == "1"

    # Flask
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # JWT
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt-secret-change-me-in-production")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Certificates
    CERTIFICATE_ISSUER = os.getenv("CERTIFICATE_ISSUER", "CertifyMe Platform")


class DevelopmentConfig(Config):
    DEBUG = True
    PROPAGATE_EXCEPTIONS = True
    CREATE_TABLES = os.getenv("CREATE_TABLES", "1") == "1"


class ProductionConfig(Config):
    DEBUG = False


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    CREATE_TABLES = True
    JWT_SECRET_KEY = "testing-jwt-secret-with-enough-bytes-for-hs256"


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
    "default": DevelopmentConfig,
}
