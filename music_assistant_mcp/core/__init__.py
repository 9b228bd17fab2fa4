"""Core request handling utilities shared by every tool set."""
