"""Shared fixtures for the content admin tests."""
