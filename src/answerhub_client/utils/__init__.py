"""Utility helpers for the AnswerHub client."""
