"""
Slideshow driver for SelfieShow

Everything here is independent of the GUI toolkit. The host window owns the
widgets and the event loop and forwards four kinds of callbacks to the driver:

    on_tick()                      - periodic timer fired
    on_key(key)                    - a key was pressed
    on_resize(width, height)       - the window changed size
    on_fullscreen_changed(flag)    - the window entered or left fullscreen

The driver answers through the small SlideshowHost interface below.
"""

import os
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, List, Optional, Protocol, Sequence, Tuple

# Image Settings
IMAGE_COUNT = 3
IMAGE_FILE_SUFFIX = "r90"
IMAGE_DIR_NAMES = ("resources", "images")

# Timer Settings
TIMER_INTERVAL = 100  # milliseconds


class Key(Enum):
    """Keys the slideshow reacts to"""

    SPACE = "space"
    F12 = "f12"
    ESCAPE = "escape"
    OTHER = "other"


class PeriodicTimer(Protocol):
    """Repeating timer handle; QTimer satisfies this"""

    def start(self, msec: int) -> None: ...

    def stop(self) -> None: ...


class SlideshowHost(Protocol):
    """Capabilities the window must provide to the driver"""

    def show_image(self, image: Optional[Any]) -> None: ...

    def set_image_size(self, width: int, height: int) -> None: ...

    def set_fullscreen(self, fullscreen: bool) -> None: ...

    def set_cursor_visible(self, visible: bool) -> None: ...


class ImageSet:
    """Fixed set of decoded images; a slot that failed to load is None"""

    def __init__(self, images: Sequence[Optional[Any]]):
        self._images: Tuple[Optional[Any], ...] = tuple(images)

    def __len__(self) -> int:
        return len(self._images)

    def __getitem__(self, index: int) -> Optional[Any]:
        return self._images[index]

    def __iter__(self) -> Iterator[Optional[Any]]:
        return iter(self._images)

    def is_loaded(self, index: int) -> bool:
        return self._images[index] is not None

    @property
    def loaded_indices(self) -> List[int]:
        return [i for i, image in enumerate(self._images) if image is not None]

    @property
    def loaded_count(self) -> int:
        return len(self.loaded_indices)


@dataclass
class DisplayState:
    """What the slideshow is currently showing"""

    index: Optional[int] = None
    image: Optional[Any] = None
    is_fullscreen: bool = False
    cursor_visible: bool = True
    width: int = 0
    height: int = 0


def make_image_file_name(i: int, suffix: Optional[str]) -> str:
    """Make a file name of the form <i><suffix>.jpg"""
    if suffix is None:
        suffix = ""
    return f"{i}{suffix}.jpg"


def make_file_path(*names: str) -> str:
    """Join path elements with the platform separator and print the result"""
    result = os.path.join(*names) if names else ""
    print(result)
    return result


def load_images(base_dir: str, decode: Callable[[str], Optional[Any]],
                count: int = IMAGE_COUNT, suffix: Optional[str] = IMAGE_FILE_SUFFIX) -> ImageSet:
    """Load the numbered images from <base_dir>/resources/images.

    A file that is missing, or that the decoder cannot read, is reported on
    stdout and its slot is left empty. The decoder returns None for a file it
    cannot read. Loading always continues with the remaining files.
    """
    images: List[Optional[Any]] = []
    # Paths stay relative to the working directory when no root is given
    root = () if base_dir in ("", os.curdir) else (base_dir,)

    for i in range(1, count + 1):
        file_name = make_image_file_name(i, suffix)
        path = make_file_path(*root, *IMAGE_DIR_NAMES, file_name)

        if not os.path.isfile(path):
            print(f"{path} (No such file or directory)")
            images.append(None)
            continue

        image = decode(path)
        if image is None:
            print(f"Error loading image: {path}")
            images.append(None)
            continue

        images.append(image)

    image_set = ImageSet(images)
    if count and not image_set.loaded_count:
        print(f"Warning: no images loaded from {os.path.join(*root, *IMAGE_DIR_NAMES)}")
    return image_set


class SlideshowDriver:
    """Picks the image to show and tracks fullscreen and cursor state"""

    def __init__(self, images: ImageSet, host: SlideshowHost, timer: PeriodicTimer,
                 rng: Optional[random.Random] = None, interval_ms: int = TIMER_INTERVAL):
        self.images = images
        self.host = host
        self.timer = timer
        self.rng = rng if rng is not None else random.Random()
        self.interval_ms = interval_ms
        self.state = DisplayState()

    def start(self) -> None:
        """Show the first image and start the periodic timer"""
        self.update_image()
        self.timer.start(self.interval_ms)

    def stop(self) -> None:
        """Stop the periodic timer"""
        self.timer.stop()

    def update_image(self) -> int:
        """Show a randomly selected slot and return its index.

        Draws are independent, so the same slot may be picked twice in a row.
        An empty slot blanks the view.
        """
        index = self.rng.randrange(len(self.images))
        self.state.index = index

        if self.images.is_loaded(index):
            self.state.image = self.images[index]
        else:
            self.state.image = None

        self.host.show_image(self.state.image)
        return index

    def update_cursor(self) -> None:
        """Hide the cursor if we are fullscreen"""
        self.state.cursor_visible = not self.state.is_fullscreen
        self.host.set_cursor_visible(self.state.cursor_visible)

    def toggle_fullscreen(self) -> None:
        self.state.is_fullscreen = not self.state.is_fullscreen
        self.host.set_fullscreen(self.state.is_fullscreen)

    def on_tick(self) -> None:
        self.update_image()

    def on_key(self, key: Key) -> None:
        if key is Key.SPACE:
            self.update_image()
        elif key is Key.F12:
            self.toggle_fullscreen()
            self.update_cursor()
        elif key is Key.ESCAPE:
            # Leaving fullscreen is the host's job; it reports through
            # on_fullscreen_changed before the key arrives here.
            self.update_cursor()

    def on_resize(self, width: int, height: int) -> None:
        """Stretch the image to the new window size"""
        self.state.width = width
        self.state.height = height
        self.host.set_image_size(width, height)

    def on_fullscreen_changed(self, is_fullscreen: bool) -> None:
        self.state.is_fullscreen = is_fullscreen
