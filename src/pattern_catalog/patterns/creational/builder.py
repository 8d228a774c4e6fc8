"""Builder: assemble a third-party Dialog whose interface cannot change.

The builder collects only the parts the caller sets and applies them to the
dialog in a fixed order when ``build`` is called.
"""
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from pattern_catalog.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, os.PathLike]


class Dialog:
    """Stand-in for a dialog widget provided by an external library."""

    def set_title(self, text: str) -> None:
        print(f"setting title text {text}")

    def set_title_color(self, color: str) -> None:
        print(f"setting title color {color}")

    def set_message(self, text: str) -> None:
        print(f"setting message {text}")

    def set_message_color(self, color: str) -> None:
        print(f"setting message color {color}")

    def set_image(self, bitmap_bytes: bytes) -> None:
        print(f"setting image with size {len(bitmap_bytes)}")

    def show(self) -> None:
        print(f"showing dialog {self!r}")


@dataclass
class TextView:
    """Text attributes of a dialog part."""

    text: str = ""
    color: str = "#00000"


class DialogBuilder:
    """Collects dialog parts and builds a configured Dialog."""

    def __init__(self, init: Optional[Callable[["DialogBuilder"], None]] = None):
        self._title: Optional[TextView] = None
        self._message: Optional[TextView] = None
        self._image: Optional[PathLike] = None

        if init is not None:
            init(self)

    def title(self, **attributes: str) -> "DialogBuilder":
        self._title = TextView(**attributes)
        return self

    def message(self, **attributes: str) -> "DialogBuilder":
        self._message = TextView(**attributes)
        return self

    def image(self, supplier: Callable[[], PathLike]) -> "DialogBuilder":
        """Set the image file; ``supplier`` is called once, immediately."""
        self._image = supplier()
        return self

    def build(self) -> Dialog:
        print("build")
        dialog = Dialog()

        if self._title is not None:
            dialog.set_title(self._title.text)
            dialog.set_title_color(self._title.color)

        if self._message is not None:
            dialog.set_message(self._message.text)
            dialog.set_message_color(self._message.color)

        if self._image is not None:
            dialog.set_image(Path(self._image).read_bytes())

        logger.debug(
            "Dialog built",
            has_title=self._title is not None,
            has_message=self._message is not None,
            has_image=self._image is not None,
        )
        return dialog


def dialog(init: Callable[[DialogBuilder], None]) -> Dialog:
    """Create a dialog builder, let ``init`` configure it and build the Dialog."""
    return DialogBuilder(init).build()


def demo() -> None:
    print("Build dialog")

    with tempfile.TemporaryDirectory() as tmp_dir:
        image_path = Path(tmp_dir) / "image.jpg"
        image_path.touch()

        built = dialog(
            lambda builder: builder
            .title(text="Dialog Title")
            .message(text="Dialog Message", color="#333333")
            .image(lambda: image_path)
        )

    print("Show dialog")
    built.show()
