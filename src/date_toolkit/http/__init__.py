"""Módulo HTTP para fontes de feriados remotas."""

from .client import HttpClient

__all__ = ["HttpClient"]
