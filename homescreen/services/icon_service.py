# homescreen/services/icon_service.py

import hashlib
from collections import OrderedDict
from pathlib import Path

from PyQt6.QtGui import QPixmap
from PIL import Image, ImageDraw, ImageFont, UnidentifiedImageError

from homescreen.core.constants import ICON_CACHE_DIR_NAME, ICON_CACHE_MAX_SIZE
from homescreen.utils.logger_utils import logger

# Muted tile colours for generated placeholders
PLACEHOLDER_COLORS: tuple[tuple[int, int, int], ...] = (
    (230, 0, 18),
    (0, 152, 210),
    (250, 180, 0),
    (0, 171, 102),
    (140, 90, 200),
    (235, 90, 150),
)


def initials_for(label: str, length: int = 2) -> str:
    """First letter of up to `length` words, e.g. 'Metroid Dread' -> 'MD'."""
    words = [w for w in label.split() if w[:1].isalnum()]
    if not words:
        return "?"
    return "".join(w[0] for w in words[:length]).upper()


class IconService:
    """
    Resolves icon references to pixmaps. Checks the in-memory cache, then the
    icon file itself; anything missing or unreadable gets a generated
    placeholder stored on disk.
    """

    def __init__(self, cache_dir: Path, base_dir: Path | None = None):
        self.cache_dir = cache_dir / ICON_CACHE_DIR_NAME
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        self.base_dir = base_dir or Path(".")

        # ---L1 Cache (In-Memory) ---
        self.memory_cache: OrderedDict[str, QPixmap] = OrderedDict()

    def get_icon(self, key: str, icon_ref: str, label: str, size: int) -> QPixmap:
        """Returns a pixmap for `icon_ref`, scaled by the caller."""
        cache_key = f"{key}@{size}"
        if (pixmap := self.memory_cache.get(cache_key)) is not None:
            self.memory_cache.move_to_end(cache_key)
            return pixmap

        source_path = self.resolve_path(icon_ref)
        pixmap = QPixmap()
        if source_path is not None and self.is_valid_image(source_path):
            pixmap = QPixmap(str(source_path))

        if pixmap.isNull():
            placeholder_path = self.placeholder_path(key, label, size)
            pixmap = QPixmap(str(placeholder_path))

        self._add_to_memory_cache(cache_key, pixmap)
        return pixmap

    def resolve_path(self, icon_ref: str) -> Path | None:
        if not icon_ref:
            return None
        path = Path(icon_ref)
        if not path.is_absolute():
            path = self.base_dir / path
        return path if path.is_file() else None

    @staticmethod
    def is_valid_image(image_path: Path) -> bool:
        """Validates that a file can be opened as an image without decoding it fully."""
        try:
            with Image.open(image_path) as img:
                img.verify()
            return True
        except (UnidentifiedImageError, OSError) as e:
            logger.warning(f"Icon '{image_path}' is not a readable image: {e}")
            return False

    def placeholder_path(self, key: str, label: str, size: int) -> Path:
        """Generates (once) and returns a placeholder tile with the label's initials."""
        target = self.cache_dir / f"{key}_{size}.png"
        if target.exists():
            return target

        digest = hashlib.md5(key.encode("utf-8")).digest()
        color = PLACEHOLDER_COLORS[digest[0] % len(PLACEHOLDER_COLORS)]

        img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
        draw = ImageDraw.Draw(img)
        draw.rounded_rectangle((0, 0, size - 1, size - 1), radius=size // 8, fill=color)

        text = initials_for(label)
        font = ImageFont.load_default()
        try:
            left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
            position = ((size - (right - left)) / 2 - left, (size - (bottom - top)) / 2 - top)
            draw.text(position, text, font=font, fill=(255, 255, 255, 255))
        except UnicodeEncodeError:
            # The bitmap fallback font only covers latin-1
            logger.debug(f"Cannot render initials '{text}' with the default font. Leaving tile blank.")

        try:
            img.save(target, "PNG")
            logger.debug(f"Generated placeholder icon '{target.name}'")
        except OSError as e:
            logger.error(f"Could not save placeholder icon to {target}: {e}")
        return target

    def _add_to_memory_cache(self, key: str, pixmap: QPixmap):
        """Adds a pixmap to the memory cache, evicting the least recently used one."""
        if len(self.memory_cache) >= ICON_CACHE_MAX_SIZE:
            oldest_key, _ = self.memory_cache.popitem(last=False)
            logger.debug(f"Icon cache full. Evicting: {oldest_key}")
        self.memory_cache[key] = pixmap
