"""Utility helpers for mdblocks."""
