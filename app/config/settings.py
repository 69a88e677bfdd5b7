# app/config/settings.py
# Application configuration loaded from the environment (and .env when present)

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _split_csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Settings:
    """Runtime settings for the Taskini API"""

    DATABASE = {
        'url': os.getenv('DATABASE_URL', 'sqlite:///./taskini.db'),
        'echo': os.getenv('DATABASE_ECHO', 'false').lower() == 'true',
    }

    # Token issuance and verification
    AUTH = {
        'secret_key': os.getenv('SECRET_KEY', 'change-me-in-production'),
        'algorithm': os.getenv('ALGORITHM', 'HS256'),
        'access_token_expire_minutes': int(os.getenv('ACCESS_TOKEN_EXPIRE_MINUTES', 7 * 24 * 60)),
        'min_password_length': 6,
    }

    # Profile photo uploads
    UPLOADS = {
        'upload_dir': os.getenv('UPLOAD_DIR', 'uploads'),
        'max_photo_size': int(os.getenv('MAX_PHOTO_SIZE', 5 * 1024 * 1024)),  # 5MB
        'allowed_photo_types': {
            'image/jpeg': '.jpg',
            'image/png': '.png',
            'image/gif': '.gif',
        },
    }

    SERVER = {
        'host': os.getenv('HOST', '0.0.0.0'),
        'port': int(os.getenv('PORT', '5000')),
        'reload': os.getenv('RELOAD', 'false').lower() == 'true',
        'log_level': os.getenv('LOG_LEVEL', 'INFO').upper(),
        'cors_origins': _split_csv(os.getenv(
            'CORS_ORIGINS',
            'http://localhost:3000,http://127.0.0.1:3000',
        )),
    }

    # Default admin created by create_tables.py
    ADMIN = {
        'name': os.getenv('ADMIN_NAME', 'Administrator'),
        'email': os.getenv('ADMIN_EMAIL'),
        'password': os.getenv('ADMIN_PASSWORD'),
    }


settings = Settings()
