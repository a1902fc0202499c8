"""
Editing session state

A Session belongs to the caller and is handed to an Api. It carries the
credentials and, at most, one current changeset. The current changeset only
changes through ensure_current() and reset().
"""

from loguru import logger

from pyosm.model import Changeset

NO_CHANGESET = 'no_changeset'
PENDING = 'pending'
OPEN_REMOTE = 'open_remote'


class Session(object):

    def __init__(self, credentials=None):
        self.credentials = credentials
        self._changeset = None
        self._state = NO_CHANGESET

    @property
    def changeset(self):
        return self._changeset

    @property
    def state(self):
        return self._state

    def ensure_current(self, api):
        """
        Return the session's open changeset, finding or creating one on first use.

        Reuses an open changeset that already belongs to the user if the API
        reports one (the first one listed), otherwise creates a new one. Once a
        changeset is current this returns it without touching the network.

        Any failure leaves the session without a changeset and propagates.
        """
        if self._state == OPEN_REMOTE:
            return self._changeset

        try:
            changeset = api.find_open_changeset()
            if changeset is None:
                self._state = PENDING
                created = api.create(Changeset())
                # A changeset the server just created is open
                changeset = created._replace(open=True)
                logger.info("Created changeset {}", changeset.id)
            else:
                logger.info("Reusing open changeset {}", changeset.id)
        except Exception:
            self._state = NO_CHANGESET
            raise

        self._changeset = changeset
        self._state = OPEN_REMOTE
        return changeset

    def reset(self):
        """Forget the current changeset. Nothing is sent to the server."""
        self._changeset = None
        self._state = NO_CHANGESET

    def __repr__(self):
        return 'Session(credentials=%r, state=%s, changeset=%s)' % (
            self.credentials, self._state,
            self._changeset.id if self._changeset is not None else None)
