from collections import Counter
from typing import Dict, Sequence

from models.user import User, subscription_label


def tier_breakdown(users: Sequence[User]) -> Dict[str, int]:
    """
    Counts users per subscription tier label, most popular first.
    Out-of-range codes are grouped under 'Unknown'.
    """
    counts = Counter(subscription_label(u.subscription_type) for u in users)
    return dict(counts.most_common())


def generate_admin_report(users: Sequence[User]) -> str:
    """
    Generates the admin analytics text for all registered users.

    Args:
        users (Sequence[User]): Users in registration order.

    Returns:
        str: Header, active user count, one entry per user and the tier summary.
    """
    lines = []
    lines.append("--- ADMIN'S DATABASE/ANALYTICS ---")
    lines.append(f"Active Users: {len(users)}")

    # Raw subscription codes here, the labels are only used on payslips
    for user in users:
        lines.append(f"Name: {user.name}, Username: {user.username}")
        lines.append(f"Subscription Type: {user.subscription_type}")
        lines.append(f"Billing Email: {user.billing.email}, Contact: {user.billing.contact_number}")

    if users:
        lines.append("--- Subscription Breakdown ---")
        for label, count in tier_breakdown(users).items():
            lines.append(f"{label}: {count}")

    return "\n".join(lines)
