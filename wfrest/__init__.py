"""Building blocks for a REST framework: JSON values, base64, timestamps, string pieces, thread ids and aspects."""

__version__ = "0.9.7"