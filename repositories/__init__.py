"""Persistence layer: record store backends for Sale records."""
