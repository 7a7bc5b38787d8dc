"""FIX tag-value codecs, SOFH framing, FIXP session message types and FIXS TLS presets."""

__version__ = "0.1.0"