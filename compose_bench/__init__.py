"""Closures vs classes: object composition micro-benchmark."""
