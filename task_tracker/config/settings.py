import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _env_bool(name: str, default: str = 'false') -> bool:
    return os.getenv(name, default).strip().lower() in ('1', 'true', 'yes', 'on')


class Settings:
    """Application settings read from the environment (and .env when present)"""

    def __init__(self):
        # Flask settings
        self.SECRET_KEY = os.getenv('SECRET_KEY')
        self.FLASK_ENV = os.getenv('FLASK_ENV', 'development')
        self.DEBUG = self.FLASK_ENV == 'development'
        self.PORT = int(os.getenv('PORT', 5000))
        self.LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

        # In-memory store + X-User-Id auth, no Firebase needed
        self.DEV_MODE = _env_bool('DEV_MODE')

        # CORS settings
        self.CORS_ORIGINS = [
            origin.strip()
            for origin in os.getenv('CORS_ORIGINS', 'http://localhost:5000,http://127.0.0.1:5000').split(',')
            if origin.strip()
        ]

        # Firebase settings
        self.FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
        self.FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH', './serviceAccountKey.json')
        self.FIREBASE_WEB_API_KEY = os.getenv('FIREBASE_WEB_API_KEY')
        self.FIRESTORE_EMULATOR_HOST = os.getenv('FIRESTORE_EMULATOR_HOST')
        self.FIREBASE_AUTH_EMULATOR_HOST = os.getenv('FIREBASE_AUTH_EMULATOR_HOST')

        # Storage settings
        self.TASKS_COLLECTION = os.getenv('TASKS_COLLECTION', 'tasks')

    @property
    def uses_emulators(self) -> bool:
        return bool(self.FIRESTORE_EMULATOR_HOST or self.FIREBASE_AUTH_EMULATOR_HOST)

    def validate(self):
        """Validate required settings"""
        if self.DEV_MODE:
            return True

        required_vars = ['SECRET_KEY']
        if not self.uses_emulators:
            required_vars += ['FIREBASE_PROJECT_ID', 'FIREBASE_WEB_API_KEY']

        missing_vars = [var for var in required_vars if not getattr(self, var)]

        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

        # Validate SECRET_KEY strength
        if len(self.SECRET_KEY) < 32:
            raise ValueError("SECRET_KEY must be at least 32 characters long")

        return True
