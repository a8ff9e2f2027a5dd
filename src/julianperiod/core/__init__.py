"""Shared types, errors and numeric primitives."""
