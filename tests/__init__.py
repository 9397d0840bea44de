"""Tests for the energy dashboard library."""
