import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from core.exceptions import MalformedRecordError, StoreUnavailableError
from models.user import BillingInfo, User
from services.file_manager import ensure_folder

logger = logging.getLogger(__name__)

# name, username, subscription, payment mode, email, contact
LINES_PER_RECORD = 6


def serialize_user(user: User) -> str:
    """
    Returns the six-line text block for a user, newline-terminated.
    """
    fields = [
        user.name,
        user.username,
        str(user.subscription_type),
        user.billing.mode_of_payment,
        user.billing.email,
        user.billing.contact_number,
    ]
    return "".join(f"{value}\n" for value in fields)


def parse_users(lines: List[str], source: Union[str, Path] = "<memory>") -> List[User]:
    """
    Parses consecutive six-line groups into User objects.

    Args:
        lines (List[str]): File lines without their line terminators.
        source: File name used in error messages.

    Returns:
        List[User]: Users in file order.

    Raises:
        MalformedRecordError: If the last group is short or a subscription
            line is not a base-10 integer.
    """
    if len(lines) % LINES_PER_RECORD:
        start = len(lines) - len(lines) % LINES_PER_RECORD
        raise MalformedRecordError(
            source, start + 1,
            f"incomplete record: expected {LINES_PER_RECORD} lines, "
            f"found {len(lines) - start}",
        )

    users = []
    for start in range(0, len(lines), LINES_PER_RECORD):
        name, username, sub_raw, payment, email, contact = lines[start:start + LINES_PER_RECORD]
        try:
            subscription = int(sub_raw.strip())
        except ValueError:
            raise MalformedRecordError(
                source, start + 3, f"subscription type is not an integer: {sub_raw!r}"
            )
        users.append(User(
            name=name,
            username=username,
            subscription_type=subscription,
            billing=BillingInfo(
                mode_of_payment=payment,
                email=email,
                contact_number=contact,
            ),
        ))
    return users


class UserRecordStore:
    """
    Ordered collection of users mirrored to a line-oriented text file.

    The file is opened and closed inside each load/append/rewrite call;
    no handle is kept between operations.
    """
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._users: List[User] = []

    def initialize(self) -> None:
        """
        Loads the users file. A missing or unreadable file leaves the store
        empty; the file will be created by the first append.

        Raises:
            MalformedRecordError: If the file exists but is corrupt.
        """
        try:
            self.load_all()
        except StoreUnavailableError as e:
            logger.warning("Unable to open or read the users file, starting empty: %s", e)
            self._users = []

    def load_all(self) -> None:
        """
        Reads every record from the users file into memory, replacing
        whatever was loaded before.

        Raises:
            StoreUnavailableError: If the file is missing or unreadable.
            MalformedRecordError: If a record is truncated or corrupt.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise StoreUnavailableError(f"{self.path}: {e}") from e

        lines = text.split("\n")
        # A trailing newline leaves one empty element behind
        if lines and lines[-1] == "":
            lines.pop()

        try:
            self._users = parse_users(lines, self.path)
        except MalformedRecordError as e:
            logger.error("Users file is corrupt: %s", e)
            raise

        logger.info("Loaded %d users from %s", len(self._users), self.path)

    def append(self, user: User) -> None:
        """
        Appends a user to the file, then to memory.

        Raises:
            OSError: If the write fails; memory is left unchanged.
        """
        ensure_folder(self.path.parent)
        with open(self.path, "a", encoding="utf-8", newline="\n") as f:
            f.write(serialize_user(user))

        self._users.append(user)
        logger.info("Saved user '%s' (%d total)", user.username, len(self._users))

    def rewrite_all(self) -> None:
        """Truncates the file and writes every in-memory user back to it."""
        with open(self.path, "w", encoding="utf-8", newline="\n") as f:
            for user in self._users:
                f.write(serialize_user(user))
        logger.info("Rewrote %s with %d users", self.path, len(self._users))

    def find_exact(self, name: str, username: str) -> Optional[User]:
        """
        Returns the first user whose name and username both match exactly,
        or None.
        """
        for user in self._users:
            if user.name == name and user.username == username:
                return user
        return None

    def count(self) -> int:
        return len(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def snapshot(self) -> Tuple[User, ...]:
        """Read-only view of all users in registration order."""
        return tuple(self._users)
