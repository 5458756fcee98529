"""
in-memory accounts gating the game window

accounts live only as long as the process; nothing is written to disk.
"""
import hashlib
import hmac
import logging
import os
import re

from PySide6.QtCore import QObject, Signal, Slot

from .config import DEFAULT_MIN_PASSWORD_LENGTH

logger = logging.getLogger(__name__)

USERNAME_RE = re.compile(r"^[A-Za-z0-9_.-]{3,32}$")
HASH_ITERATIONS = 100_000
SALT_BYTES = 16


class AuthError(Exception):
    """sign-in/up failure with a message fit for the user"""


def _hash_password(password, salt):
    return hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, HASH_ITERATIONS)


class AuthService(QObject):
    """
    sign up, sign in, sign out; emits auth_changed(signed_in)
    """
    auth_changed = Signal(bool)
    error_occurred = Signal(str)

    def __init__(self, min_password_length=DEFAULT_MIN_PASSWORD_LENGTH, parent=None):
        super().__init__(parent)
        self.min_password_length = min_password_length
        self._accounts = {}        # username -> (salt, hash)
        self.current_user = None

    @property
    def is_signed_in(self):
        return self.current_user is not None

    def has_account(self, username):
        return username.strip().lower() in self._accounts

    def _register(self, username, password):
        if not USERNAME_RE.match(username):
            raise AuthError("Username must be 3-32 letters, digits, '_', '.' or '-'.")
        if len(password) < self.min_password_length:
            raise AuthError(f"Password must be at least {self.min_password_length} characters.")
        key = username.lower()
        if key in self._accounts:
            raise AuthError(f"Username '{username}' is already taken.")
        salt = os.urandom(SALT_BYTES)
        self._accounts[key] = (salt, _hash_password(password, salt))

    def _verify(self, username, password):
        record = self._accounts.get(username.lower())
        # same message either way so usernames can't be probed
        if record is None:
            raise AuthError("Invalid username or password.")
        salt, expected = record
        if not hmac.compare_digest(expected, _hash_password(password, salt)):
            raise AuthError("Invalid username or password.")

    @Slot(str, str)
    def sign_up(self, username, password):
        """
        create an account and sign straight in
        returns True on success, else emits error_occurred
        """
        username = username.strip()
        try:
            self._register(username, password)
        except AuthError as e:
            logger.warning("sign-up failed for %r: %s", username, e)
            self.error_occurred.emit(str(e))
            return False
        logger.info("account created: %s", username)
        self._set_user(username)
        return True

    @Slot(str, str)
    def sign_in(self, username, password):
        """
        returns True on success, else emits error_occurred
        """
        username = username.strip()
        try:
            self._verify(username, password)
        except AuthError as e:
            logger.warning("sign-in failed for %r", username)
            self.error_occurred.emit(str(e))
            return False
        self._set_user(username)
        return True

    @Slot()
    def sign_out(self):
        if not self.is_signed_in:
            return
        logger.info("signed out: %s", self.current_user)
        self.current_user = None
        self.auth_changed.emit(False)

    def _set_user(self, username):
        self.current_user = username
        logger.info("signed in: %s", username)
        self.auth_changed.emit(True)
