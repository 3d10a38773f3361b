"""Allow running FocusDash as a module: python -m focusdash."""

import logging
import sys

from PyQt6.QtWidgets import QApplication

from .app import FocusDashApp, _make_icon
from .log import configure_logging
from .settings import load_settings
from .ui.styles import PALETTE


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    logging.getLogger(__name__).info("FocusDash starting")

    app = QApplication(sys.argv)
    app.setApplicationName("FocusDash")
    app.setOrganizationName("FocusDash")
    app.setWindowIcon(_make_icon(PALETTE["accent"]))

    window = FocusDashApp(settings)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
