import os


class Config:
    GAMEHUB_ENV = os.environ.get('GAMEHUB_ENV', 'development')
    ALLOWED_ORIGINS = os.environ.get('ALLOWED_ORIGINS', '*').split(',')
    # Prepended to shared message URLs; empty keeps them relative ("?gameType=...")
    MESSAGE_BASE_URL = os.environ.get('GAMEHUB_MESSAGE_BASE_URL', '')
    # Finished sessions older than this are dropped by cleanup
    SESSION_MAX_AGE_SEC = int(os.environ.get('GAMEHUB_SESSION_MAX_AGE_SEC', '3600'))
    # Running sessions with no guess for this long are dropped too
    SESSION_IDLE_SEC = int(os.environ.get('GAMEHUB_SESSION_IDLE_SEC', '86400'))
    LOG_LEVEL = os.environ.get('GAMEHUB_LOG_LEVEL', 'INFO')
