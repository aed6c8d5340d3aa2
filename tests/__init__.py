"""Tests for product-archiver."""
