"""Gazool 2048 - a terminal 2048 with animated tile slides."""
import logging

__version__ = "0.1.0"
__author__ = "Gazool 2048 contributors"

logging.getLogger(__name__).addHandler(logging.NullHandler())
