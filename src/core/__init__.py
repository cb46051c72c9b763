"""Shared configuration, constants, errors, logging, and typed models."""
