"""Mark attendance from a local camera as the currently logged-in user.

Stop with Ctrl+C; the camera is released on exit.
"""

from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from eduscan.attendance.debounce import RescanDebouncer
from eduscan.config import get_settings_module
from eduscan.container import build_container
from eduscan.core.exceptions import ProviderUnavailable
from eduscan.scanning.camera_source import CameraScanSource
from eduscan.scanning.session import ScanSession


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    logging.basicConfig(level=getattr(settings, "LOG_LEVEL", "INFO"))

    container = build_container(settings=settings)
    user = container.auth_service.current_user()
    if user is None:
        raise SystemExit("Nobody is logged in. Log in through the API first.")

    source = CameraScanSource(
        camera_index=settings.CAMERA_INDEX,
        fps=settings.SCAN_FPS,
        box_size=settings.SCAN_BOX_SIZE,
    )
    session = ScanSession(
        container.attendance_service,
        user,
        debouncer=RescanDebouncer(container.rescan_window_seconds),
    )

    try:
        for event in session.run(source):
            if event.outcome:
                o = event.outcome
                print(f"{o.student.name} ({o.student.grade}): {o.status.value} at {o.marked_at}")
            else:
                print(f"! {event.error}")
    except ProviderUnavailable as e:
        raise SystemExit(str(e))
    except KeyboardInterrupt:
        source.stop()


if __name__ == "__main__":
    main()
