# /// script
# requires-python = ">=3.10"
# dependencies = [
#     "PySide6",
# ]
# ///

"""
SelfieShow - Random Image Slideshow

Features:
- Shows one of three images from resources/images, picked at random
- Picks a new image every 100 milliseconds
- Image is stretched to fill the window
- Cursor is hidden while fullscreen

Usage:
    python selfieshow.py [OPTIONS]

Options:
    --resources PATH      Folder containing resources/images (default: current directory)
    --interval MSEC       Milliseconds between image changes (default: 100)
    --fullscreen          Start in fullscreen
    --rotate              Rotate the image view by 90 degrees
    --seed NUMBER         Seed for the random image selection

Controls:
    Space        - Next image
    F12          - Toggle fullscreen
    ESC          - Leave fullscreen
"""

import sys
import random
import argparse
from typing import List, Optional

try:
    from PySide6.QtWidgets import (QApplication, QWidget, QMainWindow)
    from PySide6.QtGui import (QImage, QPixmap, QPainter, QColor, QPalette, QKeyEvent)
    from PySide6.QtCore import (Qt, QTimer, QEvent, QRect)
except ImportError:
    print("PySide6 is required. Install it with: pip install PySide6")
    sys.exit(1)

from slideshow_driver import (IMAGE_COUNT, IMAGE_FILE_SUFFIX, TIMER_INTERVAL, ImageSet,
                              Key, SlideshowDriver, load_images)

# Configuration Constants
DEFAULT_CONFIG = {
    'resources': '.',
    'interval': TIMER_INTERVAL,
    'fullscreen': False,
    'rotate': False,
    'seed': None,
}

# Window Settings
WINDOW_TITLE = "SelfieShow"
INITIAL_WINDOW_WIDTH = 300
INITIAL_WINDOW_HEIGHT = 275

KEY_MAP = {
    Qt.Key_Space: Key.SPACE,
    Qt.Key_F12: Key.F12,
    Qt.Key_Escape: Key.ESCAPE,
}


def decode_image(path: str) -> Optional[QImage]:
    """Decode an image file; None if Qt cannot read it"""
    image = QImage(path)
    if image.isNull():
        return None
    return image


def qt_key(key: int) -> Key:
    """Translate a Qt key code to a slideshow key"""
    return KEY_MAP.get(key, Key.OTHER)


class ImageView(QWidget):
    """Widget that paints one image stretched to a fit size"""

    def __init__(self, parent=None):
        super().__init__(parent)

        self.pixmap = QPixmap()
        self.fit_width = 0
        self.fit_height = 0
        self.rotate = False

        # Set background to black
        self.setAutoFillBackground(True)
        palette = self.palette()
        palette.setColor(QPalette.Window, QColor(0, 0, 0))
        self.setPalette(palette)

    def set_image(self, image) -> None:
        """Set the displayed image; None clears the view"""
        if image is None:
            self.pixmap = QPixmap()
        elif isinstance(image, QImage):
            self.pixmap = QPixmap.fromImage(image)
        else:
            self.pixmap = image
        self.update()

    def set_fit_size(self, width: int, height: int) -> None:
        """Set the size the image is drawn at, ignoring its aspect ratio"""
        self.fit_width = width
        self.fit_height = height
        self.update()

    def set_rotate(self, rotate: bool) -> None:
        self.rotate = rotate
        self.update()

    def paintEvent(self, event) -> None:
        """Paint the widget"""
        if self.pixmap.isNull() or self.fit_width <= 0 or self.fit_height <= 0:
            return

        painter = QPainter(self)
        painter.setRenderHint(QPainter.SmoothPixmapTransform)

        target = QRect(0, 0, self.fit_width, self.fit_height)
        if self.rotate:
            # Rotate about the centre of the drawn image
            painter.translate(target.center())
            painter.rotate(90)
            painter.translate(-target.center())

        painter.drawPixmap(target, self.pixmap)
        painter.end()


class SelfieShowWindow(QMainWindow):
    """Main window; forwards Qt events to the slideshow driver"""

    def __init__(self, images: ImageSet, config: Optional[dict] = None):
        super().__init__()

        self.config = DEFAULT_CONFIG.copy()
        if config:
            self.config.update(config)

        # Initialize UI
        self.init_ui()

        # Set up slide timer
        self.slide_timer = QTimer(self)

        self.driver = SlideshowDriver(
            images,
            host=self,
            timer=self.slide_timer,
            rng=random.Random(self.config['seed']),
            interval_ms=self.config['interval'],
        )
        self.slide_timer.timeout.connect(self.driver.on_tick)

        # Size the image once before any resize event arrives
        self.driver.on_resize(self.width(), self.height())

    def init_ui(self) -> None:
        """Initialize the user interface"""
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(INITIAL_WINDOW_WIDTH, INITIAL_WINDOW_HEIGHT)

        # Create central widget
        self.image_view = ImageView(self)
        self.image_view.set_rotate(self.config['rotate'])
        self.setCentralWidget(self.image_view)

        # Set focus policy to accept keyboard events
        self.setFocusPolicy(Qt.StrongFocus)

    def start_slideshow(self) -> None:
        """Start the slideshow"""
        if self.config['fullscreen']:
            self.driver.on_key(Key.F12)
        self.driver.start()

    # SlideshowHost

    def show_image(self, image) -> None:
        self.image_view.set_image(image)

    def set_image_size(self, width: int, height: int) -> None:
        self.image_view.set_fit_size(width, height)

    def set_fullscreen(self, fullscreen: bool) -> None:
        if fullscreen:
            self.showFullScreen()
        else:
            self.showNormal()

    def set_cursor_visible(self, visible: bool) -> None:
        if visible:
            self.unsetCursor()
            self.image_view.unsetCursor()
        else:
            self.setCursor(Qt.BlankCursor)
            self.image_view.setCursor(Qt.BlankCursor)

    # Qt events

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Handle key press events"""
        key = qt_key(event.key())

        if key is Key.OTHER:
            super().keyPressEvent(event)
            return

        if key is Key.ESCAPE and self.isFullScreen():
            # Qt has no built-in ESC-leaves-fullscreen, so provide it here
            self.showNormal()
            self.driver.on_fullscreen_changed(self.isFullScreen())

        self.driver.on_key(key)

    def changeEvent(self, event) -> None:
        """Report fullscreen changes to the driver"""
        if event.type() == QEvent.WindowStateChange:
            self.driver.on_fullscreen_changed(self.isFullScreen())
        super().changeEvent(event)

    def resizeEvent(self, event) -> None:
        """Handle resize events"""
        super().resizeEvent(event)
        self.driver.on_resize(self.width(), self.height())

    def closeEvent(self, event) -> None:
        """Handle window close event"""
        self.driver.stop()
        event.accept()


def parse_args(argv: Optional[List[str]] = None) -> dict:
    """Parse command line arguments into a config dict"""
    parser = argparse.ArgumentParser(description="SelfieShow random image slideshow")
    parser.add_argument("--resources", help="Folder containing resources/images", default=None)
    parser.add_argument("--interval", type=int, help="Milliseconds between image changes", default=None)
    parser.add_argument("--fullscreen", action="store_true", help="Start in fullscreen")
    parser.add_argument("--rotate", action="store_true", help="Rotate the image view by 90 degrees")
    parser.add_argument("--seed", type=int, help="Seed for the random image selection", default=None)

    args = parser.parse_args(argv)

    config = DEFAULT_CONFIG.copy()

    # Override configuration with command line arguments if provided
    if args.resources is not None:
        config['resources'] = args.resources
    if args.interval is not None:
        if args.interval <= 0:
            parser.error("--interval must be a positive number of milliseconds")
        config['interval'] = args.interval
    if args.fullscreen:
        config['fullscreen'] = True
    if args.rotate:
        config['rotate'] = True
    if args.seed is not None:
        config['seed'] = args.seed

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """Main function"""
    app = QApplication(sys.argv[:1])
    config = parse_args(argv)

    images = load_images(config['resources'], decode_image, IMAGE_COUNT, IMAGE_FILE_SUFFIX)

    window = SelfieShowWindow(images, config)
    window.show()
    window.start_slideshow()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
