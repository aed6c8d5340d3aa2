"""Tests for the archiver backends."""
