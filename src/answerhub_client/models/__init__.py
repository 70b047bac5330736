"""Data models for AnswerHub API payloads."""

from .nodes import Answer, Article, Author, Comment, Node, NodeList, Question

__all__ = [
    "Answer",
    "Article",
    "Author",
    "Comment",
    "Node",
    "NodeList",
    "Question",
]
