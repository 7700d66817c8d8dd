import os


def _env_seconds(name, default):
    """Read a positive number of seconds from the environment"""
    try:
        value = float(os.environ.get(name, default))
    except ValueError:
        return default
    return value if value > 0 else default


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # JSON Settings
    JSON_AS_ASCII = False

    # Contact Form Settings
    CONTACT_API_ENDPOINT = os.environ.get(
        'CONTACT_API_ENDPOINT',
        'https://iaw3hfgw1g.execute-api.ap-northeast-1.amazonaws.com/prod/contact')
    # Seconds, int or float; malformed values fall back to 10
    CONTACT_REQUEST_TIMEOUT = _env_seconds('CONTACT_REQUEST_TIMEOUT', 10)
    STATUS_MESSAGE_TIMEOUT = 5


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    # Tests never talk to the real gateway
    CONTACT_API_ENDPOINT = 'https://contact.test/submit'
    CONTACT_REQUEST_TIMEOUT = 1


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
