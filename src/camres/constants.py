from camres.models import Point

# Minimum width*height a candidate must reach to be considered by best-fit
PREVIEW_PIXEL_FLOOR = 1280 * 720
HIGH_RES_PIXEL_FLOOR = 2000 * 1500

# Returned by best-fit when there are no candidates at all
DEFAULT_PREVIEW_RESOLUTION = (1920, 1080)
DEFAULT_HIGH_RES_RESOLUTION = (2000, 1500)

DEFAULT_MAX_DISTORTION = 0.15


def default_resolution(high_res_mode: bool) -> Point:
    """Return a fresh copy of the hard-coded fallback for *high_res_mode*."""
    x, y = DEFAULT_HIGH_RES_RESOLUTION if high_res_mode else DEFAULT_PREVIEW_RESOLUTION
    return Point(x=x, y=y)


def pixel_floor(high_res_mode: bool) -> int:
    """Return the minimum pixel count for *high_res_mode*."""
    return HIGH_RES_PIXEL_FLOOR if high_res_mode else PREVIEW_PIXEL_FLOOR
