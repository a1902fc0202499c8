"""Credential strategies.

Both kinds are requests auth objects: the transport hands them over as
``auth=`` and never looks at which kind it got. Neither may be a tuple,
since requests turns any 2-tuple ``auth=`` into HTTP Basic auth.
"""
from dataclasses import dataclass
from typing import Optional

from requests.auth import AuthBase, HTTPBasicAuth


@dataclass(frozen=True, repr=False)
class BasicAuth(AuthBase):
    username: str
    password: str

    def __call__(self, request):
        return HTTPBasicAuth(self.username, self.password)(request)

    def __repr__(self):
        return 'BasicAuth(username=%r, password=***)' % (self.username,)


@dataclass(frozen=True, repr=False)
class TokenAuth(AuthBase):
    """An opaque token, optionally with a secret.

    The default signing sends the token as an OAuth 2 bearer token. Override
    sign() for schemes that need the secret to compute a signature.
    """
    token: str
    secret: Optional[str] = None

    def sign(self, request):
        request.headers['Authorization'] = 'Bearer %s' % self.token
        return request

    def __call__(self, request):
        return self.sign(request)

    def __repr__(self):
        return 'TokenAuth(token=%r, secret=%s)' % (self.token, '***' if self.secret else None)
