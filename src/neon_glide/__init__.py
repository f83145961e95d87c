"""Neon Glide: steer a hovercraft through falling neon shards."""

__version__ = "0.1.0"
