"""Test fixtures for model-describer tests."""
