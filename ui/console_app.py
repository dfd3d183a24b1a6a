import sys
import logging
from typing import Callable, Optional

import config
from core.exceptions import MalformedRecordError
from core.record_store import UserRecordStore
from models.user import User
from services.analytics_service import generate_admin_report
from services.auth_service import verify_admin_pin
from services.member_service import (
    first_token, format_payslip, login_member, register_member, resolve_subscription_choice
)
from services.pdf_service import create_payslip_pdf, payslip_path

logger = logging.getLogger(__name__)


class GymConsoleApp:
    """
    The console application for the gym membership system.
    1. Loads the users file into the record store.
    2. Shows the main menu until the user exits.
    3. Routes each choice to Register, Login (+ payslip) or Analytics.
    """
    def __init__(self, store: UserRecordStore, settings: config.Settings,
                 input_func: Callable[[str], str] = input):
        self.store = store
        self.settings = settings
        self.input = input_func

    def start(self) -> None:
        """Loads the data and runs the menu loop. Never returns."""
        try:
            self.store.initialize()
        except MalformedRecordError as e:
            print(f"Error: the users file is corrupt and cannot be loaded.\n{e}")
            sys.exit(1)

        self.run()

    def run(self) -> None:
        """Shows the main menu until '0' is chosen or input ends."""
        while True:
            print("--- USER'S GYM MEMBERSHIP ---")
            print("[1] Register User\n[2] Login User\n[3] Analytics\n[0] Exit")
            try:
                choice = self.input("Enter your choice: ").strip()

                if choice == "1":
                    self.register_user()
                elif choice == "2":
                    user = self.login_user()
                    if user:
                        self.print_payslip(user)
                        self.offer_payslip_pdf(user)
                elif choice == "3":
                    self.view_analytics()
                elif choice == "0":
                    break
                else:
                    print("Invalid choice. Please try again.")
            except EOFError:
                break

        print("Exiting the program.")
        sys.exit(0)

    # --- OPERATIONS ---

    def register_user(self) -> Optional[User]:
        """
        Collects a new registration and saves it.
        Returns the stored user, or None if the users file could not be written.
        """
        print("--- REGISTER USER ---")
        name = self.input("Enter Customer's Name: ")
        username = first_token(self.input("Select a Username: "))

        print("--- Subscription Type ---")
        print("[1] Basic\n[2] Standard\n[3] Premium")
        subscription, valid = resolve_subscription_choice(self.input("Choose: "))
        if not valid:
            print("Invalid choice, setting to Basic by default.")

        print("--- Billing Information ---")
        mode = self.input("Mode of Payment (CASH/CARD): ")
        email = self.input("Email Address: ")
        contact = self.input("Contact Number: ")

        try:
            user = register_member(self.store, name, username, subscription, mode, email, contact)
        except OSError as e:
            logger.error("Failed to save registration for '%s': %s", username, e)
            print(f"Could not save registration: {e}")
            return None

        print("Registration complete!")
        return user

    def login_user(self) -> Optional[User]:
        """
        Asks for name and username and looks the user up.
        Returns the matched user, or None after printing a not-found message.
        """
        print("--- LOGIN/VERIFY USER ---")
        name = self.input("Enter Customer's Name: ")
        username = first_token(self.input("Enter Username: "))

        user = login_member(self.store, name, username)
        if user is None:
            print("User not found. Please try again.")
        return user

    def print_payslip(self, user: User) -> None:
        print(format_payslip(user))

    def offer_payslip_pdf(self, user: User) -> Optional[str]:
        answer = self.input("Save payslip as PDF? (y/N): ").strip().lower()
        if answer not in ("y", "yes"):
            return None

        try:
            path = create_payslip_pdf(payslip_path(self.settings.payslip_folder, user), user)
        except OSError as e:
            logger.error("Failed to write payslip PDF for '%s': %s", user.username, e)
            print(f"Could not save payslip: {e}")
            return None

        logger.info("Payslip PDF written to %s", path)
        print(f"Payslip saved to {path}")
        return str(path)

    def view_analytics(self) -> bool:
        """
        PIN-gated listing of all users. Returns True if access was granted.
        """
        entered = first_token(self.input("Enter Admin PIN to view Analytics: "))

        if not verify_admin_pin(entered, self.settings.admin_pin_hash):
            logger.warning("Admin analytics access denied")
            print("Invalid PIN. Access Denied.")
            return False

        print(generate_admin_report(self.store.snapshot()))
        return True
