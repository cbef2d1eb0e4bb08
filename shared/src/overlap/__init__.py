"""Shared configuration and schemas for the Overlap venue intelligence layer."""
