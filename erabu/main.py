# Rev 0.1.0

# erabu/main.py
import sys
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from erabu.app_context import AppContext
from erabu.ui.main_window import MainWindow
from erabu.utils.logging_setup import setup_logging


def main():
    app = QApplication(sys.argv)
    QCoreApplication.setApplicationName("erabu")

    logfile = setup_logging("erabu")
    print(f"[logging] Writing to: {logfile}")

    # --- DI wiring ---
    ctx = AppContext.create()

    # --- UI ---
    win = MainWindow(ctx)
    win.show()

    # Keep a strong ref
    app.setProperty("mainWindow", win)
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
