import logging
import sys

from PyQt5.QtWidgets import QApplication

from PA_Libs.ImageEditingLib.image_adjuster_window import ImageAdjusterWindow


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = ImageAdjusterWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
