"""Support ticket API."""
