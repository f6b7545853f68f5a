from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .attendance.controller import register as register_attendance
from .config import get_settings_module
from .container import Container, build_container
from .grades.controller import register as register_grades
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(*, settings_module: Optional[str] = None, container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info(f"Starting with settings={settings_module} store={getattr(settings, 'STORE_BACKEND', 'file')}")

    container = container or build_container(settings=settings)
    app.extensions["eduscan"] = container

    register_users(app, container)
    register_grades(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app
