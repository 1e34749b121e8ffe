"""Tests for imagename/lib."""
