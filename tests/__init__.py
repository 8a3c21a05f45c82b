"""Tests for modsync."""
