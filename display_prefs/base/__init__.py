"""Shared building blocks: errors, cancellation, identifiers, logging, DTOs."""
