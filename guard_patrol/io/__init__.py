"""Artifact layout and Arrow schemas for patrol logs."""
