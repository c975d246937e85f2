import logging
import sys
from PySide6.QtWidgets import QApplication, QMessageBox
from BackEnd.core.errors import ConfigError
from BackEnd.services.session_manager import SessionManager
from FrontEnd.ui_main import MainWindow

def main():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
    logging.getLogger('matplotlib').setLevel(logging.WARNING)

    app = QApplication(sys.argv)
    try:
        manager = SessionManager()
    except ConfigError as exc:
        QMessageBox.critical(None, "Study Tracker", exc.message)
        sys.exit(1)
    win = MainWindow(manager)
    win.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
