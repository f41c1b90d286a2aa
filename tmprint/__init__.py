"""Line-by-line text printing for the Epson TM-T88V receipt printer."""

__version__ = "0.1.0"
__all__ = ["cli", "console", "printer"]