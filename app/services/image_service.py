import logging
import mimetypes
from pathlib import Path
from typing import Optional, Tuple
from xml.etree import ElementTree as etree

from app.settings import settings

logger = logging.getLogger(__name__)

IMAGE_WRAPPER_CLASS = "block my-6"
IMAGE_CLASS = "rounded-lg w-full h-auto"
RESPONSIVE_WIDTH = "1200"
RESPONSIVE_HEIGHT = "630"
RESPONSIVE_SIZES = "(max-width: 768px) 100vw, (max-width: 1200px) 80vw, 70rem"


def get_image_from_public_dir(
    image_path: str, public_dir: Path | None = None
) -> Tuple[Optional[bytes], Optional[str]]:
    """
    Retrieve an image file from the public directory
    """
    root = Path(public_dir or settings.public_path).resolve()
    try:
        path = (root / image_path).resolve()
        if not path.is_relative_to(root):
            logger.warning(f"Refusing image path outside public dir: {image_path}")
            return None, None
        if not path.is_file():
            logger.warning(f"Image not found: {image_path}")
            return None, None

        image_data = path.read_bytes()
        if not image_data:
            logger.warning(f"No image data found for: {image_path}")
            return None, None

        return image_data, get_content_type_from_filename(path.name)

    except OSError as e:
        logger.error(f"Error retrieving image {image_path}: {e}")
        return None, None


def get_content_type_from_filename(filename: str) -> str:
    """
    Determine content type from file extension
    """
    filename = filename.lower()
    if filename.endswith((".jpg", ".jpeg")):
        return "image/jpeg"
    elif filename.endswith(".png"):
        return "image/png"
    elif filename.endswith(".gif"):
        return "image/gif"
    elif filename.endswith(".svg"):
        return "image/svg+xml"
    elif filename.endswith(".webp"):
        return "image/webp"
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or "application/octet-stream"


def is_site_relative(src: Optional[str]) -> bool:
    return bool(src) and src.startswith("/")


def wrap_image(img: etree.Element) -> etree.Element:
    """
    Build the responsive wrapper for an <img> element.

    Site-relative sources get fixed intrinsic dimensions and a sizes hint,
    external ones are lazy loaded. The wrapper takes over the image's tail text.
    """
    src = img.get("src", "")
    alt = img.get("alt", "")

    wrapper = etree.Element("span", {"class": IMAGE_WRAPPER_CLASS})
    wrapper.tail = img.tail

    attrs = {"src": src, "alt": alt, "class": IMAGE_CLASS}
    if is_site_relative(src):
        attrs.update(
            {
                "width": RESPONSIVE_WIDTH,
                "height": RESPONSIVE_HEIGHT,
                "sizes": RESPONSIVE_SIZES,
                "loading": "lazy",
                "decoding": "async",
            }
        )
    else:
        attrs["loading"] = "lazy"
    if img.get("title"):
        attrs["title"] = img.get("title")

    etree.SubElement(wrapper, "img", attrs)
    return wrapper


def wrap_images(root: etree.Element) -> etree.Element:
    """Replace every <img> under root with its responsive wrapper."""
    parents = [p for p in root.iter() if any(child.tag == "img" for child in p)]
    for parent in parents:
        for index, child in enumerate(list(parent)):
            if child.tag == "img":
                parent[index] = wrap_image(child)
    return root
