"""jsmoke — field validation core for the jsmk project manager."""

__version__ = "0.1.0"
