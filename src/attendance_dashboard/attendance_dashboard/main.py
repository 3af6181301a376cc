from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container


def create_container() -> Container:
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger(__name__).debug("settings=%s", settings_module)

    return build_container(
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)),
        report_default_days=int(getattr(settings, "REPORT_DEFAULT_DAYS", 30)),
        top_absentees=int(getattr(settings, "TOP_ABSENTEES_LIMIT", 5)),
        upload_default_status=str(getattr(settings, "UPLOAD_DEFAULT_STATUS", "present")),
        upload_unknown_status=str(getattr(settings, "UPLOAD_UNKNOWN_STATUS", "default")),
    )
