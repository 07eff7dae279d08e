"""Local placeholder images: a category gradient with the product name on top."""

from __future__ import annotations

import base64
import io
import logging
import textwrap

from PIL import Image, ImageDraw, ImageFont

from prompts.templates import DEFAULT_GRADIENT, PLACEHOLDER_GRADIENTS

logger = logging.getLogger(__name__)

PLACEHOLDER_SIZE = 512
DATA_URL_PREFIX = "data:"


def to_data_url(data: bytes, mime_type: str = "image/png") -> str:
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{encoded}"


def decode_data_url(url: str) -> bytes | None:
    """Return the payload of a base64 data URL, or None for any other URL."""
    if not url or not url.startswith(DATA_URL_PREFIX):
        return None
    header, _, payload = url.partition(",")
    if not header.endswith(";base64"):
        return None
    try:
        return base64.b64decode(payload, validate=True)
    except ValueError:
        logger.warning("Malformed data URL (%d chars)", len(url))
        return None


def is_data_url(url: str) -> bool:
    return bool(url) and url.startswith(DATA_URL_PREFIX)


def _load_font(size: int) -> ImageFont.ImageFont:
    try:
        return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf", size)
    except (OSError, IOError):
        return ImageFont.load_default()


def gradient_image(
    size: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> Image.Image:
    """Vertical gradient from ``top`` to ``bottom``."""
    mask = Image.linear_gradient("L").resize((size, size))
    start = Image.new("RGB", (size, size), top)
    end = Image.new("RGB", (size, size), bottom)
    return Image.composite(end, start, mask)


def _draw_centered_lines(
    draw: ImageDraw.ImageDraw,
    lines: list[str],
    font: ImageFont.ImageFont,
    canvas_size: int,
    top: int,
    spacing: int = 8,
) -> int:
    y = top
    for line in lines:
        bbox = draw.textbbox((0, 0), line, font=font)
        text_w = bbox[2] - bbox[0]
        text_h = bbox[3] - bbox[1]
        draw.text(((canvas_size - text_w) // 2, y), line, fill=(255, 255, 255), font=font)
        y += text_h + spacing
    return y


def render_placeholder(
    title: str,
    subtitle: str = "",
    category: str = "",
    size: int = PLACEHOLDER_SIZE,
) -> Image.Image:
    top, bottom = PLACEHOLDER_GRADIENTS.get(category, DEFAULT_GRADIENT)
    image = gradient_image(size, top, bottom).convert("RGBA")

    # Frosted panel behind the text
    overlay = Image.new("RGBA", image.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    margin = size // 10
    draw.rounded_rectangle(
        (margin, margin * 3, size - margin, size - margin * 3),
        radius=size // 20,
        fill=(255, 255, 255, 51),
    )
    image = Image.alpha_composite(image, overlay)

    draw = ImageDraw.Draw(image)
    title_font = _load_font(max(12, size // 14))
    subtitle_font = _load_font(max(10, size // 24))

    title_lines = textwrap.wrap(title, width=18) or [""]
    subtitle_lines = textwrap.wrap(subtitle, width=32)

    y = _draw_centered_lines(draw, title_lines, title_font, size, top=margin * 4)
    if subtitle_lines:
        _draw_centered_lines(draw, subtitle_lines, subtitle_font, size, top=y + margin // 2)

    return image.convert("RGB")


def placeholder_url(title: str, subtitle: str = "", category: str = "") -> str:
    """Render a placeholder and return it as a PNG data URL."""
    image = render_placeholder(title, subtitle, category)
    buf = io.BytesIO()
    image.save(buf, format="PNG", optimize=True)
    logger.debug("Rendered placeholder for %r (%d bytes)", title, buf.tell())
    return to_data_url(buf.getvalue(), "image/png")
