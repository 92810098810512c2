"""Read-only view over the frontend build shipped inside the distribution.

The Vite build output is installed as package data under ``bundled_ui/dist``.
At startup it is read once into an immutable ``AssetBundle``; a missing or
unreadable directory fails here instead of on the first request. The HTTP
layer serves files from ``AssetBundle.root``.
"""

import posixpath
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, Mapping, Optional

from server_config import ServerError


BUNDLE_PACKAGE = "bundled_ui"
BUNDLE_ROOT = "dist"


class BundleAccessError(ServerError):
    """The embedded asset directory is missing or unreadable (a packaging defect)."""


class AssetNotFound(LookupError):
    pass


@dataclass(frozen=True)
class Asset:
    path: str
    content: bytes = field(repr=False)
    modified: Optional[float] = None

    @property
    def size(self) -> int:
        return len(self.content)


def normalize(path: str) -> str:
    """Bundle-relative form of ``path``: no leading slash, no dot segments."""
    cleaned = posixpath.normpath("/" + path.replace("\\", "/"))
    return cleaned.lstrip("/")


class AssetBundle:
    def __init__(self, root: Path, assets: Mapping[str, Asset]):
        self.root = root
        self._assets = MappingProxyType(dict(assets))
        dirs = set()
        for name in self._assets:
            parent = posixpath.dirname(name)
            while parent:
                dirs.add(parent)
                parent = posixpath.dirname(parent)
        self._dirs: FrozenSet[str] = frozenset(dirs)

    @classmethod
    def from_directory(cls, root) -> "AssetBundle":
        root = Path(root)
        if not root.is_dir():
            raise BundleAccessError(f"asset directory not found: {root}")
        return cls(root, _collect(root))

    @property
    def assets(self) -> Mapping[str, Asset]:
        return self._assets

    def open(self, path: str) -> Asset:
        name = normalize(path)
        try:
            return self._assets[name]
        except KeyError:
            raise AssetNotFound(path) from None

    def is_dir(self, path: str) -> bool:
        name = normalize(path)
        return name == "" or name in self._dirs

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and normalize(path) in self._assets

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._assets))

    def __len__(self) -> int:
        return len(self._assets)


def _collect(top: Path) -> Dict[str, Asset]:
    found: Dict[str, Asset] = {}
    pending = [(top, "")]
    try:
        while pending:
            node, prefix = pending.pop()
            for child in node.iterdir():
                name = f"{prefix}{child.name}"
                if child.is_dir():
                    pending.append((child, name + "/"))
                elif child.is_file():
                    found[name] = Asset(name, child.read_bytes(), child.stat().st_mtime)
    except OSError as e:
        raise BundleAccessError(f"failed to read embedded files: {e}") from e
    return found


def load_bundle(package: str = BUNDLE_PACKAGE, root: str = BUNDLE_ROOT) -> AssetBundle:
    try:
        base = resources.files(package)
    except ModuleNotFoundError as e:
        raise BundleAccessError(f"failed to access embedded files: {e}") from e

    top = base.joinpath(root)
    if not top.is_dir():
        raise BundleAccessError(f"failed to access embedded files: {package}/{root} is not a directory")
    # served straight from disk, so a zipped install cannot be used
    if not isinstance(top, Path):
        raise BundleAccessError(f"failed to access embedded files: {package} is not installed as a directory")

    bundle = AssetBundle(top, _collect(top))
    if not len(bundle):
        raise BundleAccessError(f"failed to access embedded files: {package}/{root} is empty")
    return bundle
