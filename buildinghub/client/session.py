"""
Client session.

A Session holds the tokens and the signed-in user. It is created once by
the caller and handed to ApiClient; nothing in the client keeps session
state at module level. SessionManager owns its lifecycle:

    restore()  on startup, reload persisted tokens and the current user
    login()    / register() start a session and persist its tokens
    logout()   clears the session and the persisted tokens
"""

import logging
import os
from abc import ABC, abstractmethod
from typing import Optional

import yaml

from buildinghub.client.errors import Unauthenticated
from buildinghub.client.models import TokenPair, User

logger = logging.getLogger(__name__)


class Session:
    def __init__(self):
        self.tokens: Optional[TokenPair] = None
        self.user: Optional[User] = None

    @property
    def access_token(self) -> Optional[str]:
        return self.tokens.access_token if self.tokens else None

    @property
    def is_authenticated(self) -> bool:
        return self.tokens is not None and self.user is not None

    def clear(self):
        self.tokens = None
        self.user = None


class TokenStore(ABC):
    """Persistence for the token pair between runs"""

    @abstractmethod
    def load(self) -> Optional[TokenPair]:
        pass

    @abstractmethod
    def save(self, tokens: TokenPair):
        pass

    @abstractmethod
    def clear(self):
        pass


class MemoryTokenStore(TokenStore):
    def __init__(self, tokens: Optional[TokenPair] = None):
        self._tokens = tokens

    def load(self) -> Optional[TokenPair]:
        return self._tokens

    def save(self, tokens: TokenPair):
        self._tokens = tokens

    def clear(self):
        self._tokens = None


class FileTokenStore(TokenStore):
    """Keeps tokens in a YAML file readable only by the owner"""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> Optional[TokenPair]:
        if not os.path.exists(self.path):
            return None

        with open(self.path, "r") as r_file:
            data = yaml.safe_load(r_file) or dict()

        if not data.get("access_token") or not data.get("refresh_token"):
            logger.warning(f"Ignoring incomplete session file {self.path}")
            return None
        return TokenPair(
            access_token=data["access_token"], refresh_token=data["refresh_token"]
        )

    def save(self, tokens: TokenPair):
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w") as w_file:
            yaml.safe_dump(tokens.model_dump(), w_file)
        os.chmod(self.path, 0o600)

    def clear(self):
        if os.path.exists(self.path):
            os.remove(self.path)


class SessionManager:
    def __init__(self, api, store: TokenStore):
        self.api = api
        self.store = store

    @property
    def session(self) -> Session:
        return self.api.session

    async def restore(self) -> bool:
        """
        Reload persisted tokens and the current user.

        Returns:
            True if a session was restored

        Tokens rejected by the service are discarded. Other failures
        (e.g. network) propagate and leave the stored tokens in place.
        """
        tokens = self.store.load()
        if tokens is None:
            return False

        self.session.tokens = tokens
        try:
            await self._load_user()
        except Unauthenticated:
            logger.info("Stored session was rejected, signing out")
            self.store.clear()
            self.session.clear()
            return False
        except Exception:
            self.session.clear()
            raise
        return True

    async def login(self, email: str, password: str) -> User:
        data = await self.api.post(
            "/iam/auth/login", json={"email": email, "password": password}, auth=False
        )
        return self._start(data)

    async def register(self, email: str, password: str, role: str = "resident") -> User:
        data = await self.api.post(
            "/iam/auth/register",
            json={"email": email, "password": password, "role": role},
            auth=False,
        )
        return self._start(data)

    async def refresh(self) -> TokenPair:
        """
        Exchange the refresh token for a new pair and reload the user.

        A refresh token the service rejects ends the session: it is removed
        from the session and the store before Unauthenticated propagates.
        """
        if self.session.tokens is None:
            raise Unauthenticated("UNAUTHENTICATED", "Not signed in")

        try:
            data = await self.api.post(
                "/iam/auth/refresh",
                json={"refresh_token": self.session.tokens.refresh_token},
                auth=False,
            )
        except Unauthenticated:
            logger.info("Refresh token was rejected, signing out")
            self.logout()
            raise
        tokens = TokenPair(**data)
        self.session.tokens = tokens
        self.store.save(tokens)
        await self._load_user()
        return tokens

    def logout(self):
        self.store.clear()
        self.session.clear()

    async def _load_user(self) -> User:
        data = await self.api.get("/iam/me")
        self.session.user = User(**data)
        return self.session.user

    def _start(self, data: dict) -> User:
        tokens = TokenPair(
            access_token=data["access_token"], refresh_token=data["refresh_token"]
        )
        self.session.tokens = tokens
        self.session.user = User(**data["user"])
        self.store.save(tokens)
        logger.info(f"Signed in as {self.session.user.email}")
        return self.session.user
