"""Scene graph command files: loading, text outline, lighting, export and a trackball camera."""

__version__ = "0.1.0"