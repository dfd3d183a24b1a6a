import sys
import logging
from pydantic import ValidationError
from config import Settings
from core.record_store import UserRecordStore
from ui.console_app import GymConsoleApp

"""
Entry point for the Gym Membership console.
Run this file to start the application.
"""

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}")
        sys.exit(2)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if settings.legacy_pin_in_use:
        logger.warning(
            "No admin PIN configured (GYM_ADMIN_PIN_HASH or GYM_ADMIN_PIN), "
            "using the insecure legacy PIN."
        )

    store = UserRecordStore(settings.users_file)
    app = GymConsoleApp(store, settings)

    # Loads the users file and runs the menu loop until Exit
    app.start()


if __name__ == "__main__":
    main()
