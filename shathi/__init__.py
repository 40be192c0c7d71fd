# -*- coding: utf-8 -*-
"""Shathi — personal diabetes log backend (glucose, medicines, food, settings)."""

__version__ = "1.0.0"
