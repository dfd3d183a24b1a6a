from dataclasses import dataclass

# Subscription codes as stored in the users file
SUBSCRIPTION_TIERS = {
    1: "Basic",
    2: "Standard",
    3: "Premium",
}

DEFAULT_SUBSCRIPTION = 1


def subscription_label(code: int) -> str:
    """
    Returns the display name of a subscription code.
    Example: 1 -> 'Basic', 7 -> 'Unknown'.
    """
    return SUBSCRIPTION_TIERS.get(code, "Unknown")


@dataclass(frozen=True)
class BillingInfo:
    """
    Payment details attached to a single gym user.
    """
    mode_of_payment: str  # 'CASH' or 'CARD', not enforced
    email: str
    contact_number: str


@dataclass(frozen=True)
class User:
    """
    Represents a registered gym user and their subscription.
    """
    name: str
    username: str
    subscription_type: int
    billing: BillingInfo

    @property
    def subscription_label(self) -> str:
        return subscription_label(self.subscription_type)
