"""
Configuration for the schedule sheet sync.

Values are read from the environment (a local .env file is loaded first).
"""

import os
from collections import OrderedDict
from typing import Any, Dict

from dotenv import load_dotenv

load_dotenv()

# Sessions API
SESSIONS_API_URL = os.getenv("SESSIONS_API_URL", "https://api.devcon.org/sessions")
EVENT = os.getenv("SESSIONS_EVENT", "devcon-7")
PAGE_SIZE = int(os.getenv("SESSIONS_PAGE_SIZE", "500"))
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))

# Session timestamps are rendered and bucketed into days in this timezone
SCHEDULE_TIMEZONE = os.getenv("SCHEDULE_TIMEZONE", "Asia/Bangkok")

PRESENTATION_URL = "https://devcon.org/sea/presentation/{code}"

# One spreadsheet per conference day
SPREADSHEET_IDS = OrderedDict(
    [
        ("2024-11-12", "1gWrSwjgfclJp0-VCW6GHjMOqbTfCn-Y0OGHYhZ5KpIU"),
        ("2024-11-13", "1shFpvIMJqEUMzeUcG8dL3EfdivDff5By1WgL_Ic-RqI"),
        ("2024-11-14", "1ag1-f51C7-40yBn5EDeamRnm5yw-ugIcvDvure32GEI"),
        ("2024-11-15", "1a58SeeQvXKfi_bTuymRcrmhm7nQ9w9K0gRqjp2Z6nMo"),
    ]
)

# Room id -> room name. The name is also the title of the room's tab.
ROOMS = OrderedDict(
    [
        ("main-stage", "MAINSTAGE / Masks"),
        ("stage-5", "STAGE 5 / Hats"),
        ("stage-6", "STAGE 6 / Kites"),
        ("stage-1", "STAGE 1 / Fans"),
        ("stage-2", "STAGE 2 / Lantern"),
        ("stage-3", "STAGE 3 / Fabrics"),
        ("stage-4", "STAGE 4 / Leafs"),
        ("classroom-a", "CLASSROOM A"),
        ("classroom-b", "CLASSROOM B"),
        ("classroom-c", "CLASSROOM C"),
        ("classroom-d", "CLASSROOM D"),
        ("classroom-e", "CLASSROOM E"),
        ("breakout-1", "BREAKOUT 1"),
        ("breakout-2", "BREAKOUT 2"),
        ("breakout-3", "BREAKOUT 3"),
    ]
)

# Tab copied for every new room sheet
TEMPLATE_SHEET_ID = int(os.getenv("TEMPLATE_SHEET_ID", "688800800"))

OVERVIEW_SHEET = "overview"

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def service_account_info() -> Dict[str, Any]:
    """
    Build the Google service account info from environment variables.

    Raises:
        ValueError: if the client email or private key is not set
    """
    missing = [
        name
        for name in ("GOOGLE_CLIENT_EMAIL", "GOOGLE_PRIVATE_KEY")
        if not os.getenv(name)
    ]
    if missing:
        raise ValueError(
            f"Missing Google service account settings: {', '.join(missing)}"
        )

    return {
        "type": "service_account",
        "project_id": os.getenv("GOOGLE_PROJECT_ID"),
        "private_key_id": os.getenv("GOOGLE_PRIVATE_KEY_ID"),
        "private_key": os.getenv("GOOGLE_PRIVATE_KEY").replace("\\n", "\n"),
        "client_email": os.getenv("GOOGLE_CLIENT_EMAIL"),
        "client_id": os.getenv("GOOGLE_CLIENT_ID"),
        "auth_uri": "https://accounts.google.com/o/oauth2/auth",
        "token_uri": "https://oauth2.googleapis.com/token",
        "auth_provider_x509_cert_url": "https://www.googleapis.com/oauth2/v1/certs",
        "client_x509_cert_url": os.getenv("GOOGLE_CLIENT_X509_CERT_URL"),
        "universe_domain": "googleapis.com",
    }
