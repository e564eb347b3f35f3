"""User directory: sign-up, sign-in and lookups."""

import logging

from tasklist.errors import AuthFailure, DuplicateUser
from tasklist.models.user import User, UserNameClaim
from tasklist.services.sequences import USERS, SequenceAllocator
from tasklist.store import DocumentStore

logger = logging.getLogger(__name__)


def derive_access_key(user_name: str, password: str) -> str:
    """Access key handed out at sign-up; fixed for the life of the user."""
    return user_name + password


class UserDirectory:
    """Creates users and finds them by name or access key."""

    def __init__(self, store: DocumentStore, sequences: SequenceAllocator):
        self.store = store
        self.sequences = sequences

    def find_by_name(self, user_name: str) -> list[User]:
        """Users with this exact name; normally zero or one."""
        return self.store.query(User, user_name=user_name)

    def find_by_access_key(self, access_key: str) -> User | None:
        users = self.store.query(User, access_key=access_key)
        return users[0] if users else None

    def create_user(self, user_name: str, password: str) -> User:
        """Create a user with a freshly allocated id.

        Raises DuplicateUser before allocating an id when the name is
        visibly taken. The user row is written together with its name claim,
        so a concurrent sign-up for the same name that slips past the first
        check still fails here.
        """
        if self.find_by_name(user_name):
            raise DuplicateUser(user_name)

        user_id = self.sequences.next_id(USERS)
        user = User(
            id=user_id,
            user_name=user_name,
            password=password,
            access_key=derive_access_key(user_name, password),
        )
        claim = UserNameClaim(user_name=user_name, user_id=user_id)
        if not self.store.put_new_items(claim, user):
            logger.warning(f"Lost sign-up race for '{user_name}', id {user_id} left unused")
            raise DuplicateUser(user_name)

        logger.info(f"Created user {user_id}")
        return user

    def authenticate(self, user_name: str, password: str) -> User:
        """Sign in with name and password (exact, case-sensitive match)."""
        users = self.find_by_name(user_name)
        if not users or users[0].password != password:
            raise AuthFailure("User", "Incorrect user name or password")
        return users[0]
