"""JWT issuance and verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import ExpiredSignatureError, JWTError, jwt


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenExpiredError(TokenError):
    """The token was validly signed but its expiry has passed."""


class TokenInvalidError(TokenError):
    """The token is malformed, badly signed, or missing required claims."""


@dataclass(frozen=True)
class TokenClaims:
    """Verified identity claims carried by an access token."""

    user_id: int
    email: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issues and verifies signed, time-limited bearer tokens.

    Tokens are stateless: validity depends only on signature and expiry.
    """

    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(hours=24)):
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, email: str) -> str:
        """Create a signed token for the given identity."""
        now = datetime.now(UTC)
        to_encode = {
            "id": user_id,
            "email": email,
            "iat": now,
            "exp": now + self.ttl,
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token.

        Raises:
            TokenExpiredError: the token has expired.
            TokenInvalidError: the signature, structure or claims are invalid.
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            raise TokenExpiredError("Token has expired") from None
        except JWTError as e:
            raise TokenInvalidError(str(e)) from None

        user_id = payload.get("id")
        email = payload.get("email")
        # bool is an int subclass; reject it explicitly
        if not isinstance(user_id, int) or isinstance(user_id, bool) or not isinstance(email, str):
            raise TokenInvalidError("Token is missing identity claims")
        if not isinstance(payload.get("exp"), int):
            raise TokenInvalidError("Token is missing an expiry")

        return TokenClaims(
            user_id=user_id,
            email=email,
            issued_at=datetime.fromtimestamp(payload.get("iat", payload["exp"]), UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )
