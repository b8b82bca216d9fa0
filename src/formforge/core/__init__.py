"""Core types shared across formforge."""
