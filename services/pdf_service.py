import re
from pathlib import Path
from reportlab.pdfgen import canvas
from reportlab.lib.pagesizes import A4
import config
from models.user import User
from services.file_manager import ensure_folder


def safe_file_stem(username: str) -> str:
    """
    Reduces a username to characters safe in a file name.
    Example: '../../eve' -> 'eve', '' -> 'user'.
    """
    stem = re.sub(r"[^A-Za-z0-9_.-]", "_", username).strip("._")
    return stem or "user"


def payslip_path(folder: Path, user: User) -> Path:
    """Returns where a user's payslip PDF is saved, e.g. payslips/alicet_payslip.pdf."""
    return folder / f"{safe_file_stem(user.username)}_payslip.pdf"


def create_payslip_pdf(save_path: Path, user: User) -> Path:
    """
    Generates a one-page payslip PDF for a gym user.

    Args:
        save_path (Path): The full path where the PDF will be saved.
        user (User): The logged-in user.

    Returns:
        Path: The path of the written file.
    """
    ensure_folder(save_path.parent)
    c = canvas.Canvas(str(save_path), pagesize=A4)
    w, h = A4
    y = h - 50

    # --- HEADER ---
    c.setFont("Helvetica-Bold", 18)
    c.setFillColorRGB(0.8, 0.0, 0.0) # Dark Red
    c.drawString(60, y, f"{config.GYM_NAME} - PAYSLIP")

    y -= 30
    c.setFont("Helvetica", 12)
    c.setFillColorRGB(0, 0, 0)

    # --- BODY FIELDS ---
    rows = [
        ("Username", user.username),
        ("Customer's Name", user.name),
        ("Subscription Type", user.subscription_label),
        ("Mode of Payment", user.billing.mode_of_payment),
        ("Email Address", user.billing.email),
        ("Contact Number", user.billing.contact_number),
    ]
    for label, val in rows:
        c.drawString(60, y, f"{label}: {val}")
        y -= 18

    # --- FOOTER ---
    c.setFont("Helvetica-Oblique", 9)
    c.setFillColorRGB(0.3, 0.3, 0.3)
    creator = getattr(config, 'CREATOR_NAME', 'Admin')
    c.drawString(60, 70, f"Created by: {creator}")

    c.save()
    return save_path
