
import logging
import sys

from PySide6.QtWidgets import QApplication

from gui import MainWindow


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = QApplication(sys.argv)
    window = MainWindow()
    window.resize(640, 720)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
