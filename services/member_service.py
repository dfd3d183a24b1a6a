from typing import Optional, Tuple

from core.record_store import UserRecordStore
from models.user import DEFAULT_SUBSCRIPTION, SUBSCRIPTION_TIERS, BillingInfo, User


def first_token(line: str) -> str:
    """
    Returns the first whitespace-delimited word of a line, or '' if blank.
    Usernames and PINs are read this way.
    """
    parts = line.split()
    return parts[0] if parts else ""


def resolve_subscription_choice(raw: str) -> Tuple[int, bool]:
    """
    Maps the typed subscription choice to a tier code.

    Args:
        raw (str): The user's input, e.g. '2'.

    Returns:
        Tuple[int, bool]: (tier code, was_valid). Anything other than
        1, 2 or 3 falls back to Basic with was_valid False.
    """
    try:
        choice = int(raw.strip())
    except ValueError:
        return DEFAULT_SUBSCRIPTION, False

    if choice in SUBSCRIPTION_TIERS:
        return choice, True
    return DEFAULT_SUBSCRIPTION, False


def register_member(store: UserRecordStore, name: str, username: str, subscription_type: int,
                    mode_of_payment: str, email: str, contact_number: str) -> User:
    """
    Creates a user and saves it to the store.
    Duplicate name/username pairs are allowed; lookups return the first one.

    Returns:
        User: The stored user.
    """
    user = User(
        name=name,
        username=username,
        subscription_type=subscription_type,
        billing=BillingInfo(
            mode_of_payment=mode_of_payment,
            email=email,
            contact_number=contact_number,
        ),
    )
    store.append(user)
    return user


def login_member(store: UserRecordStore, name: str, username: str) -> Optional[User]:
    """Returns the registered user matching name and username exactly, or None."""
    return store.find_exact(name, username)


def format_payslip(user: User) -> str:
    """
    Builds the payslip text shown after a successful login.
    """
    lines = [
        "--- PRINT PAYSLIP ---",
        f"Username: {user.username}",
        f"Customer's Name: {user.name}",
        "--- Subscription Type ---",
        f"Type: {user.subscription_label}",
        "--- Billing Information ---",
        f"Mode of Payment: {user.billing.mode_of_payment}",
        f"Email Address: {user.billing.email}",
        f"Contact Number: {user.billing.contact_number}",
        "--- LOG OUT USER ---",
    ]
    return "\n".join(lines)
