"""Shared types and schemas used across the catalog, runtime and CLI layers."""
