"""Loading of texture assets from disk and a shared, reference-aware store."""

from __future__ import annotations

import abc
import re
import sys
import weakref
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from eso.image import DecodedImage, ImageDecodeError, load_png, load_png_swizzled

PathLike = Union[str, Path]


class AssetError(OSError):
    """Raised when an asset file cannot be found, read or decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"Io Error; could not load file: {self.message}"


@dataclass(eq=False)
class TextureHandle:
    """Decoded texture data shared between the asset store and materials."""

    width: int
    height: int
    pitch: int
    pixels: bytes


def read_file(path: PathLike) -> bytes:
    """Read a whole file, raising AssetError on any failure."""
    file_path = Path(path)
    try:
        size = file_path.stat().st_size
    except OSError as exc:
        raise AssetError(f"Could not find file: {str(path)!r}") from exc
    try:
        handle = file_path.open("rb")
    except OSError as exc:
        raise AssetError(f"Failed to open file: {str(path)!r}.") from exc
    with handle:
        try:
            return handle.read()
        except OSError as exc:
            raise AssetError(f'Could not read file "{path}" of size: {size}') from exc


@dataclass(frozen=True)
class Asset(abc.ABC):
    """A file on disk that decodes into a texture."""

    path: str

    def name(self) -> str:
        """The last component of the path, split on either slash."""
        return re.split(r"[/\\]", self.path)[-1]

    @abc.abstractmethod
    def load(self) -> DecodedImage:
        """Read and decode the asset."""


@dataclass(frozen=True)
class Image(Asset):
    """A PNG texture stored in swizzled order."""

    def load(self) -> DecodedImage:
        data = read_file(self.path)
        try:
            return load_png_swizzled(data)
        except ImageDecodeError as exc:
            raise AssetError(f"Could not load and swizzle the png: {exc}") from exc


@dataclass(frozen=True)
class Font(Asset):
    """A bitmap font image stored in linear order."""

    def load(self) -> DecodedImage:
        data = read_file(self.path)
        try:
            return load_png(data)
        except ImageDecodeError as exc:
            raise AssetError(f"Could not load the png: {exc}") from exc


class AssetServer:
    """Keeps one texture per asset name and drops those nobody refers to."""

    def __init__(self) -> None:
        self._textures: dict[str, TextureHandle] = {}

    def add(self, asset: Asset) -> TextureHandle:
        """Load an asset, or return the texture already stored under its name."""
        name = asset.name()
        existing = self._textures.get(name)
        if existing is not None:
            return existing
        image = asset.load()
        handle = TextureHandle(image.width, image.height, image.pitch, image.pixels)
        self._textures[name] = handle
        return handle

    def size(self) -> int:
        """Number of stored textures."""
        return len(self._textures)

    def get(self, key: str) -> Optional[TextureHandle]:
        """Return the stored texture for a name, if any."""
        return self._textures.get(key)

    def check_references(self, key: str) -> Optional[tuple[int, int]]:
        """Return (strong, weak) reference counts for a texture, the store included."""
        handle = self._textures.get(key)
        if handle is None:
            return None
        # Discount the local name and the argument passed to getrefcount.
        strong = sys.getrefcount(handle) - 2
        return strong, weakref.getweakrefcount(handle)

    def drop_unused(self) -> None:
        """Forget textures held by nothing but the store."""
        for name in list(self._textures):
            if weakref.getweakrefcount(self._textures[name]):
                continue
            probe = weakref.ref(self._textures.pop(name))
            survivor = probe()
            if survivor is not None:
                self._textures[name] = survivor
            del survivor