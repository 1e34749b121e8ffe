"""Shared library code for the image name tools."""
