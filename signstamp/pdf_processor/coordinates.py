"""Module to size and position a signature on a PDF page"""

from typing import Optional

from ..models.domain import ResolvedPlacement, ScaledImageBox


def clamp(value: float, low: float, high: float) -> float:
    """
    Constrain a value to [low, high].

    When the range is inverted (high < low) the result is pinned to low.
    """
    return max(low, min(value, high))


def fit_to_box(
    img_width: float, img_height: float, max_width: float, max_height: float
) -> ScaledImageBox:
    """
    Scale an image uniformly so that it fits into a bounding box.

    The aspect ratio is preserved. Images smaller than the box are scaled up
    until one side touches the box.

    Args:
        img_width (float): Native image width.
        img_height (float): Native image height.
        max_width (float): Width of the bounding box.
        max_height (float): Height of the bounding box.

    Returns:
        ScaledImageBox: The scaled image dimensions.
    """
    scale = min(max_width / img_width, max_height / img_height)
    return ScaledImageBox(width=img_width * scale, height=img_height * scale)


def resolve(
    page_width: float,
    page_height: float,
    img_width: float,
    img_height: float,
    request_x: Optional[float],
    request_y: Optional[float],
    default_x: float,
    default_y: float,
) -> ResolvedPlacement:
    """
    Convert a top-left position into native page coordinates inside the page.

    The vertical position is the distance from the top of the page to the
    top edge of the image. PDF pages measure from the bottom edge to the
    bottom of the image, so the image height is subtracted after flipping the
    axis. Both axes are then clamped so the image stays on the page.

    Args:
        page_width (float): Page width in points.
        page_height (float): Page height in points.
        img_width (float): Scaled image width.
        img_height (float): Scaled image height.
        request_x (Optional[float]): Requested X, or None for the default.
        request_y (Optional[float]): Requested Y from the top, or None for the default.
        default_x (float): Fallback X.
        default_y (float): Fallback Y from the top.

    Returns:
        ResolvedPlacement: The draw rectangle in native page coordinates.
    """
    x = request_x if request_x is not None else default_x
    y_from_top = request_y if request_y is not None else default_y
    native_y = page_height - y_from_top - img_height

    return ResolvedPlacement(
        x=clamp(x, 0, page_width - img_width),
        y=clamp(native_y, 0, page_height - img_height),
        width=img_width,
        height=img_height,
    )
