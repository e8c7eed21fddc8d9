"""
Test suite for chartkit project.

This module contains all unit tests for the chartkit package.
"""
