"""Tests for pokebattle."""
