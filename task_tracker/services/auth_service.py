"""
Authentication Service
Resolves the calling principal and handles sign up / sign in.
Password hashing and token issuance are left to Firebase Authentication.
"""
import logging
from typing import Any, Dict, Mapping, Optional, Protocol

import firebase_admin
import requests
from firebase_admin import auth as firebase_auth

from task_tracker.models.user_model import Principal
from task_tracker.utils.errors import AuthenticationError, ConflictError, InvalidArgument, ServiceUnavailable
from task_tracker.utils.validators import Helpers, Validators

logger = logging.getLogger(__name__)

SIGN_IN_PATH = "identitytoolkit.googleapis.com/v1/accounts:signInWithPassword"


class AuthProvider(Protocol):
    def resolve(self, headers: Mapping[str, str]) -> Principal:
        """Return the authenticated principal or raise AuthenticationError"""
        ...


class FirebaseAuthProvider:
    """Principal from a Firebase ID token in the Authorization header"""

    def resolve(self, headers: Mapping[str, str]) -> Principal:
        auth_header = headers.get('Authorization') or ''
        scheme, _, token = auth_header.partition(' ')
        if not auth_header:
            raise AuthenticationError('Token is missing')
        if scheme.lower() != 'bearer' or not token.strip():
            raise AuthenticationError('Invalid token format')

        try:
            decoded_token = firebase_auth.verify_id_token(token.strip())
        except firebase_auth.ExpiredIdTokenError:
            raise AuthenticationError('Token expired')
        except firebase_auth.UserDisabledError:
            raise AuthenticationError('This account has been disabled')
        except firebase_auth.CertificateFetchError as e:
            logger.error("Could not fetch token signing certificates: %s", e)
            raise ServiceUnavailable('Authentication service unavailable')
        except (firebase_auth.InvalidIdTokenError, ValueError) as e:
            logger.info("Rejected ID token: %s", e)
            raise AuthenticationError('Invalid token')

        uid = decoded_token['uid']
        email = decoded_token.get('email') or ''
        return Principal(id=uid, display_name=decoded_token.get('name') or email.split('@')[0] or uid)


class HeaderAuthProvider:
    """DEV_MODE only: trusts the X-User-Id header"""

    def resolve(self, headers: Mapping[str, str]) -> Principal:
        user_id = (headers.get('X-User-Id') or '').strip()
        if not user_id:
            raise AuthenticationError('X-User-Id header required')
        return Principal(id=user_id, display_name=(headers.get('X-User-Name') or user_id).strip())


class AuthService:
    """Sign up and sign in against Firebase Authentication"""

    def __init__(self, web_api_key: Optional[str], auth_emulator_host: Optional[str] = None, timeout: float = 10.0):
        self.web_api_key = web_api_key
        self.auth_emulator_host = auth_emulator_host
        self.timeout = timeout

    def sign_up(self, username: str, email: str, password: str) -> Dict[str, Any]:
        username = Helpers.sanitize_string(username)
        email = Helpers.sanitize_string(email).lower()

        if not username:
            raise InvalidArgument('Username is required')
        if not Validators.validate_email(email):
            raise InvalidArgument('Invalid email format', value=email)
        if not Validators.validate_password(password):
            raise InvalidArgument('Password must be at least 6 characters')

        try:
            firebase_admin.get_app()
        except ValueError:
            # DEV_MODE never initializes firebase_admin
            raise ServiceUnavailable('Sign up is not configured')

        try:
            user = firebase_auth.create_user(email=email, password=password, display_name=username)
        except firebase_auth.EmailAlreadyExistsError:
            raise ConflictError('Email already registered')

        logger.info("User registered uid=%s", user.uid)
        return {'user_id': user.uid, 'username': username, 'email': email}

    def sign_in(self, email: str, password: str) -> Dict[str, str]:
        email = Helpers.sanitize_string(email).lower()
        if not email or not password:
            raise InvalidArgument('Email and password are required')
        if not self.web_api_key:
            raise ServiceUnavailable('Sign in is not configured')

        try:
            response = requests.post(
                self._sign_in_url(),
                params={'key': self.web_api_key},
                json={'email': email, 'password': password, 'returnSecureToken': True},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Authentication service error: %s", e)
            raise ServiceUnavailable('Authentication service unavailable')

        try:
            body = response.json()
        except ValueError:
            logger.error("Non-JSON response from Identity Toolkit (HTTP %s)", response.status_code)
            raise ServiceUnavailable('Authentication service unavailable')

        if not response.ok:
            error = body.get('error') if isinstance(body, dict) else None
            message = (error or {}).get('message', '')
            logger.info("Sign in rejected for %s: %s", email, message or response.status_code)
            if 'USER_DISABLED' in message:
                raise AuthenticationError('This account has been disabled')
            # Unknown email and wrong password are reported the same way
            raise AuthenticationError('Invalid credentials')

        return {'accessToken': body['idToken']}

    def _sign_in_url(self) -> str:
        if self.auth_emulator_host:
            return f"http://{self.auth_emulator_host}/{SIGN_IN_PATH}"
        return f"https://{SIGN_IN_PATH}"
